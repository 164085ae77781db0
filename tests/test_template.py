"""
Tests for the screen component template.
"""

from rnscreen.template import generate_screen_component


class TestGenerateScreenComponent:
    def test_interpolates_function_and_type_parameter(self):
        source = generate_screen_component("Profile")
        assert "export default function ProfileScreen(props: ScreenProps<'Profile'>) {" in source

    def test_keeps_fixed_imports_and_body(self):
        source = generate_screen_component("Profile")
        assert source.startswith("import React from 'react';\n")
        assert "import { Card, Label, ScreenHeader, ScreenWrapper } from '@components';" in source
        assert "import { ScreenProps } from '@tps/screen.types';" in source
        assert "<ScreenHeader screenProps={props} />" in source
        assert "<Card separation={20}>" in source
        assert source.endswith("}\n")

    def test_name_is_not_validated(self):
        source = generate_screen_component("my-screen 2")
        assert "my-screen 2Screen" in source
        assert "'my-screen 2'" in source

    def test_deterministic(self):
        assert generate_screen_component("Feed") == generate_screen_component("Feed")
