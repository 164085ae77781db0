"""
Registry patching: wires a screen into the screens index, the main
navigator and the ScreenParams type map.

Every patch is a plain text substitution on a known anchor. The three files
are patched one after another and each one succeeds or fails on its own.
"""
import re
import sys
import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional

PATCHED = 'patched'
ALREADY_WIRED = 'already-wired'
ANCHOR_MISSING = 'anchor-missing'
FAILED = 'failed'

SCREENS_IMPORT_ANCHOR = "} from '../screens';"
NAVIGATOR_CLOSE_ANCHOR = "  </Stack.Navigator>"
SCREEN_PARAMS_ANCHOR = "export type ScreenParams = {"

_SCREENS_IMPORT = re.compile(r"import\s*\{([^}]*)\}\s*from\s*'\.\./screens';")


class AnchorMissing(Exception):
    """The text a patch is keyed on does not occur in the target file"""

    def __init__(self, anchor: str):
        self.anchor = anchor
        super().__init__(f"anchor {anchor!r} not found")


@dataclass
class PatchResult:
    """Outcome of patching one registry file"""
    target: str
    path: Path
    status: str
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.status in (PATCHED, ALREADY_WIRED)


# -----------------------------------------------------------------------------
# screens/index.ts
# -----------------------------------------------------------------------------
def export_line(name: str) -> str:
    return f"export {{ default as {name} }} from './{name}';\n"


def patch_screens_index(content: str, name: str) -> Optional[str]:
    """Prepend the export line; None if the screen is already exported."""
    line = export_line(name)
    if line in content:
        return None
    # Same export written with different spacing or a different module path
    if re.search(r"export\s*\{\s*default\s+as\s+" + re.escape(name) + r"\s*\}", content):
        return None
    return line + content


# -----------------------------------------------------------------------------
# navigation/MainNavigator.tsx
# -----------------------------------------------------------------------------
def imported_screens(content: str) -> set:
    """Local names imported from '../screens'"""
    m = _SCREENS_IMPORT.search(content)
    if not m:
        return set()
    names = set()
    for part in m.group(1).split(','):
        part = part.strip()
        if part:
            # `Foo as Bar` binds Bar
            names.add(re.split(r'\s+as\s+', part)[-1])
    return names


def has_stack_screen(content: str, name: str) -> bool:
    pattern = r'<Stack\.Screen\b[^>]*?\bname=["\']' + re.escape(name) + r'["\']'
    return re.search(pattern, content) is not None


def stack_screen_block(name: str) -> str:
    return f'''   <Stack.Screen
      name="{name}"
      component={{{name}}}
    />
'''


def patch_navigator(content: str, name: str) -> Optional[str]:
    """Import the screen and register it in the stack navigator.

    The import entry and the <Stack.Screen> entry are guarded separately so a
    half-wired navigator gets completed instead of duplicated. Both anchors
    must be present before anything is changed.
    """
    needs_import = name not in imported_screens(content)
    needs_route = not has_stack_screen(content, name)
    if not needs_import and not needs_route:
        return None

    if needs_import and SCREENS_IMPORT_ANCHOR not in content:
        raise AnchorMissing(SCREENS_IMPORT_ANCHOR)
    if needs_route and NAVIGATOR_CLOSE_ANCHOR not in content:
        raise AnchorMissing(NAVIGATOR_CLOSE_ANCHOR)

    if needs_import:
        content = content.replace(
            SCREENS_IMPORT_ANCHOR, f"  {name},\n{SCREENS_IMPORT_ANCHOR}", 1
        )
    if needs_route:
        content = content.replace(
            NAVIGATOR_CLOSE_ANCHOR, stack_screen_block(name) + NAVIGATOR_CLOSE_ANCHOR, 1
        )
    return content


# -----------------------------------------------------------------------------
# types/screen.props.ts
# -----------------------------------------------------------------------------
def screen_params_body(content: str) -> Optional[str]:
    """Text between the ScreenParams anchor and its matching closing brace"""
    start = content.find(SCREEN_PARAMS_ANCHOR)
    if start < 0:
        return None
    body_start = start + len(SCREEN_PARAMS_ANCHOR)
    depth = 1
    for i in range(body_start, len(content)):
        if content[i] == '{':
            depth += 1
        elif content[i] == '}':
            depth -= 1
            if depth == 0:
                return content[body_start:i]
    # Unterminated object; take everything after the anchor
    return content[body_start:]


def screen_params_keys(body: str) -> set:
    """Property names declared directly in the ScreenParams object"""
    top_level = []
    depth = 0
    for ch in body:
        if ch in '{([':
            depth += 1
        elif ch in '})]':
            depth -= 1
        elif depth == 0:
            top_level.append(ch)

    keys = set()
    for member in re.split(r'[,;\n]', ''.join(top_level)):
        m = re.match(r'\s*(?:readonly\s+)?["\']?([^:?"\']+?)["\']?\??\s*:', member)
        if m:
            keys.add(m.group(1).strip())
    return keys


def patch_screen_props(content: str, name: str) -> Optional[str]:
    """Add `{name}: undefined,` as the first ScreenParams property."""
    body = screen_params_body(content)
    if body is None:
        raise AnchorMissing(SCREEN_PARAMS_ANCHOR)

    if name in screen_params_keys(body):
        return None

    return content.replace(
        SCREEN_PARAMS_ANCHOR, f"{SCREEN_PARAMS_ANCHOR}\n  {name}: undefined,", 1
    )


# -----------------------------------------------------------------------------
# Applying patches
# -----------------------------------------------------------------------------
# (layout attribute, transform) in the order the files are patched
REGISTRY_PATCHES = (
    ('screens_index', patch_screens_index),
    ('navigator', patch_navigator),
    ('screen_props', patch_screen_props),
)


async def patch_file(path: Path, label: str,
                     transform: Callable[[str, str], Optional[str]],
                     screen_name: str) -> PatchResult:
    """Read, transform and rewrite one file; never raises for I/O problems."""
    try:
        content = await asyncio.to_thread(path.read_text, encoding='utf-8')
        new_content = transform(content, screen_name)
        if new_content is None:
            print(f"Screen {screen_name} is already in {label}, skipping.")
            return PatchResult(label, path, ALREADY_WIRED)
        await asyncio.to_thread(path.write_text, new_content, encoding='utf-8')
    except AnchorMissing as e:
        print(f"⚠️  Could not add screen {screen_name} to {label}: {e}. File left unchanged.",
              file=sys.stderr)
        return PatchResult(label, path, ANCHOR_MISSING, error=e)
    except (OSError, UnicodeError) as e:
        print(f"Error adding screen {screen_name} to {label}: {e}", file=sys.stderr)
        return PatchResult(label, path, FAILED, error=e)

    print(f"Screen {screen_name} added successfully to {label}.")
    return PatchResult(label, path, PATCHED)


async def add_screen(layout, screen_name: str) -> List[PatchResult]:
    """Wire screen_name into the three registry files of layout, in order."""
    results = []
    for attr, transform in REGISTRY_PATCHES:
        path = getattr(layout, attr)
        results.append(await patch_file(path, layout.label(path), transform, screen_name))
    return results
