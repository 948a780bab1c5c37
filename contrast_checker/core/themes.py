"""Built-in theme variants: a named palette mapped to the colour pairs to check.

The evaluator knows nothing about variants. This module only decides which
foreground/background pairs a variant puts on screen.
"""

from contrast_checker.core.types import ColourPair

VARIANTS: dict[str, dict[str, str]] = {
    'accessible': {
        'primary': '#1976d2',
        'secondary': '#dc004e',
        'background.default': '#ffffff',
        'background.paper': '#f5f5f5',
        'text.primary': '#000000',
        'text.secondary': '#424242',
        'button.text': '#ffffff',
    },
    'inaccessible': {
        'primary': '#b3d4fc',
        'secondary': '#ffcccb',
        'background.default': '#ffffff',
        'background.paper': '#f8f8f8',
        'text.primary': '#a0a0a0',
        'text.secondary': '#c0c0c0',
        'button.text': '#ffffff',
    },
}

# (pair name, foreground role, background role, large text)
_PAIR_ROLES: list[tuple[str, str, str, bool]] = [
    ('heading', 'text.primary', 'background.paper', True),
    ('secondary-text', 'text.secondary', 'background.paper', False),
    ('button', 'button.text', 'primary', False),
    ('body-text', 'text.primary', 'background.default', False),
]


def variant_names() -> list[str]:
    return sorted(VARIANTS)


def get_palette(name: str) -> dict[str, str]:
    """Get a variant's palette by name."""
    if name not in VARIANTS:
        raise KeyError(f'Unknown variant: {name}. Available: {", ".join(variant_names())}')
    return VARIANTS[name]


def variant_pairs(name: str) -> list[ColourPair]:
    """Return the foreground/background pairs a variant renders."""
    palette = get_palette(name)
    return [
        ColourPair(
            name=f'{name}/{pair_name}',
            fg=palette[fg_role],
            bg=palette[bg_role],
            large=large,
            doc=f'{fg_role} on {bg_role}',
        )
        for pair_name, fg_role, bg_role, large in _PAIR_ROLES
    ]


def toggle_variant(name: str) -> str:
    """Return the other built-in variant."""
    get_palette(name)
    return 'inaccessible' if name == 'accessible' else 'accessible'
