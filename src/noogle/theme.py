"""Light and dark palette options for the page shell."""

from typing import Literal

from pydantic import BaseModel, ConfigDict


class _Options(BaseModel):
    model_config = ConfigDict(frozen=True)


class Background(_Options):
    default: str | None = None
    paper: str


class PaletteColor(_Options):
    main: str


class Palette(_Options):
    mode: Literal["light", "dark"]
    background: Background
    primary: PaletteColor
    secondary: PaletteColor


class Typography(_Options):
    font_family: str
    font_size: int = 14


class ThemeOptions(_Options):
    typography: Typography
    palette: Palette


common_options = {
    "typography": Typography(
        font_family='"Roboto", "Helvetica", "Arial", sans-serif',
    ),
}

light_theme_options = ThemeOptions(
    **common_options,
    palette=Palette(
        mode="light",
        background=Background(default="#f4f6fb", paper="#ffffff"),
        primary=PaletteColor(main="#3f5a94"),
        secondary=PaletteColor(main="#4c9a2a"),
    ),
)

dark_theme_options = ThemeOptions(
    **common_options,
    palette=Palette(
        mode="dark",
        background=Background(paper="#0f192c"),
        primary=PaletteColor(main="#6586c8"),
        secondary=PaletteColor(main="#6ad541"),
    ),
)

THEMES = {"light": light_theme_options, "dark": dark_theme_options}


def css_variables(theme: ThemeOptions) -> str:
    """Render a theme as CSS custom properties on ``:root``."""
    palette = theme.palette
    properties = {
        "--color-scheme": palette.mode,
        "--background-paper": palette.background.paper,
        "--primary-main": palette.primary.main,
        "--secondary-main": palette.secondary.main,
        "--font-family": theme.typography.font_family,
        "--font-size": f"{theme.typography.font_size}px",
    }
    if palette.background.default is not None:
        properties["--background-default"] = palette.background.default
    body = "\n".join(f"  {name}: {value};" for name, value in properties.items())
    return f":root {{\n{body}\n}}"
