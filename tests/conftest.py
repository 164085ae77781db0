"""
Shared test fixtures: a minimal React Native project on tmp_path.
"""

import json

import pytest

SCREENS_INDEX = """export { default as Home } from './Home';
export { default as Settings } from './Settings';
"""

MAIN_NAVIGATOR = """import React from 'react';
import { createNativeStackNavigator } from '@react-navigation/native-stack';
import { ScreenParams } from '@tps/screen.props';
import {
  Home,
  Settings,
} from '../screens';

const Stack = createNativeStackNavigator<ScreenParams>();

export default function MainNavigator() {
  return (
    <Stack.Navigator initialRouteName="Home">
      <Stack.Screen name="Home" component={Home} />
      <Stack.Screen
        name="Settings"
        component={Settings}
      />
  </Stack.Navigator>
  );
}
"""

SCREEN_PROPS = """import { NativeStackScreenProps } from '@react-navigation/native-stack';

export type ScreenParams = {
  Home: undefined,
  Settings: undefined,
};

export type ScreenProps<T extends keyof ScreenParams> = NativeStackScreenProps<ScreenParams, T>;
"""


@pytest.fixture
def rn_project(tmp_path):
    """A minimal React Native project with the three registry files"""
    root = tmp_path / "MyApp"
    (root / "src" / "screens" / "Home").mkdir(parents=True)
    (root / "src" / "navigation").mkdir(parents=True)
    (root / "src" / "types").mkdir(parents=True)

    (root / "package.json").write_text(json.dumps({"name": "myapp", "private": True}))
    (root / "src" / "screens" / "index.ts").write_text(SCREENS_INDEX, encoding="utf-8")
    (root / "src" / "screens" / "Home" / "index.tsx").write_text("export default function HomeScreen() {}\n")
    (root / "src" / "navigation" / "MainNavigator.tsx").write_text(MAIN_NAVIGATOR, encoding="utf-8")
    (root / "src" / "types" / "screen.props.ts").write_text(SCREEN_PROPS, encoding="utf-8")
    return root


def snapshot(root):
    """Every path under root mapped to its bytes (None for directories)"""
    return {
        p.relative_to(root).as_posix(): (p.read_bytes() if p.is_file() else None)
        for p in sorted(root.rglob("*"))
    }
