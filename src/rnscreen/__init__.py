"""
rnscreen - scaffold React Native screens and wire them into the app
"""
from .template import generate_screen_component
from .patcher import add_screen, PatchResult
from .settings import load_layout, ProjectLayout

__all__ = ['generate_screen_component', 'add_screen', 'PatchResult', 'load_layout', 'ProjectLayout']
