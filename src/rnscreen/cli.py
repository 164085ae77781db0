#!/usr/bin/env python3
import argparse
import asyncio
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from .patcher import add_screen, PatchResult
from .settings import load_defaults, load_layout, ProjectLayout
from .template import generate_screen_component

# -----------------------------------------------------------------------------
# Tool config (from config.toml)
# -----------------------------------------------------------------------------
config = load_defaults()
TOOL_NAME = config['tool_name']
PROMPT = config['prompt']


@dataclass
class ScreenReport:
    """What a single run did, file by file"""
    screen_name: str
    directory: Path
    conflict: bool = False
    created: bool = False
    results: List[PatchResult] = field(default_factory=list)

    @property
    def wired(self) -> bool:
        return self.created and all(r.ok for r in self.results)

    @property
    def unwired(self) -> List[str]:
        return [r.target for r in self.results if not r.ok]


def prompt_screen_name(message: str = PROMPT) -> str:
    # Read on the main thread, before the event loop starts, so Ctrl-C
    # interrupts the read instead of waiting on a worker thread
    return input(f"{message} ")


# -----------------------------------------------------------------------------
# Screen scaffolding
# -----------------------------------------------------------------------------
async def create_screen(layout: ProjectLayout, screen_name: str) -> ScreenReport:
    """Write the screen files and wire the screen into the registry files.

    Nothing is written when the screen's entry file already exists.
    """
    directory = layout.screen_dir(screen_name)
    report = ScreenReport(screen_name, directory)

    screen_index_path = layout.screen_entry(screen_name)
    if await asyncio.to_thread(screen_index_path.exists):
        print("There is a screen already with this name in this project.")
        report.conflict = True
        return report

    screen_component = generate_screen_component(screen_name)
    await asyncio.to_thread(directory.mkdir, parents=True, exist_ok=True)
    await asyncio.to_thread(screen_index_path.write_text, screen_component, encoding='utf-8')
    await asyncio.to_thread(layout.screen_widgets(screen_name).mkdir, parents=True, exist_ok=True)
    report.created = True

    report.results = await add_screen(layout, screen_name)

    if report.wired:
        print(f"Screen {screen_name} created successfully at {directory}")
    else:
        print(f"⚠️  Screen {screen_name} created at {directory}, but it is not wired into: "
              f"{', '.join(report.unwired)}")
    return report


async def run(layout: ProjectLayout, screen_name: str) -> int:
    report = await create_screen(layout, screen_name)
    return 0 if report.wired else 1


# -----------------------------------------------------------------------------
# CLI entrypoint
# -----------------------------------------------------------------------------
def main(argv=None):
    parser = argparse.ArgumentParser(prog=TOOL_NAME,
                                     description="Create a new screen and wire it into the app")
    parser.add_argument("name", nargs='?', help="Name of the new screen (asked for when omitted)")
    parser.add_argument("--root", help="Project root (default: nearest directory with package.json)")
    args = parser.parse_args(argv)

    if args.root is not None and not Path(args.root).is_dir():
        parser.error(f"--root: {args.root} is not an existing directory")

    try:
        layout = load_layout(args.root)
        screen_name = args.name if args.name is not None else prompt_screen_name()
        if not screen_name:
            print(f"Please provide a name for the new screen. Usage: '{TOOL_NAME} [name]'")
            return 1
        return asyncio.run(run(layout, screen_name))
    except KeyboardInterrupt:
        print("\nInterrupted by user")
        return 130
    except Exception as e:
        print(f"An error occurred while creating the screen: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
