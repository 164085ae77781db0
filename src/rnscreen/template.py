def generate_screen_component(name: str) -> str:
    '''Return the source of a new screen component called {name}Screen.'''
    component_template = f'''import React from 'react';
import {{ Card, Label, ScreenHeader, ScreenWrapper }} from '@components';
import {{ Main }} from '@components/ScreenWrapper/styled';
import {{ ScreenProps }} from '@tps/screen.types';

export default function {name}Screen(props: ScreenProps<'{name}'>) {{
  return (
    <ScreenWrapper>
      <ScreenHeader screenProps={{props}} />
      <Main>
        <Card separation={{20}}>
          <Label>Hi</Label>
        </Card>
      </Main>
    </ScreenWrapper>
  )
}}
'''
    return component_template
