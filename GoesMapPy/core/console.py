"""
Console Utilities
=================

Terminal output formatting with colors and warning suppression.

Authors: GoesMapPy contributors
Version: 0.1.0
"""

import sys
import os
import warnings

# =============================================================================
# WARNING SUPPRESSION
# =============================================================================

def suppress_warnings():
    """
    Suppress non-critical warnings to keep terminal output clean.

    Filters out:
        - Zarr warnings about numcodecs codecs in v3 stores
        - xee warnings about missing time properties
        - Deprecation warnings from the Earth Engine client
    """
    warnings.filterwarnings('ignore', category=UserWarning, module='zarr')
    warnings.filterwarnings('ignore', category=UserWarning, module='numcodecs')
    warnings.filterwarnings('ignore', message='.*Numcodecs codecs are not in the Zarr.*')
    warnings.filterwarnings('ignore', message='.*Consolidated metadata.*')

    warnings.filterwarnings('ignore', module='xee')
    warnings.filterwarnings('ignore', message=".*system:time_start.*")

    warnings.filterwarnings('ignore', category=DeprecationWarning)
    warnings.filterwarnings('ignore', category=FutureWarning)


# =============================================================================
# TERMINAL COLORS
# =============================================================================

def _color_enabled():
    if 'NO_COLOR' in os.environ:
        return False
    return bool(
        sys.stdout.isatty() and os.name != 'nt' or
        os.environ.get('TERM_PROGRAM') == 'vscode' or
        os.environ.get('WT_SESSION') or
        'ANSICON' in os.environ
    )


_COLOR = _color_enabled()

# ANSI codes by style name, empty when the terminal has no color support.
_STYLES = {
    name: (code if _COLOR else '')
    for name, code in (
        ('reset', '\033[0m'),
        ('bold', '\033[1m'),
        ('dim', '\033[2m'),
        ('label', '\033[97m'),
        ('title', '\033[94m'),
        ('ok', '\033[92m'),
        ('fail', '\033[91m'),
        ('note', '\033[96m'),
        ('warn', '\033[93m'),
    )
}


def _style(text, *names):
    """Wrap text in one or more ANSI styles."""
    prefix = ''.join(_STYLES[name] for name in names)
    return f"{prefix}{text}{_STYLES['reset']}"


# =============================================================================
# FORMATTED OUTPUT
# =============================================================================

def print_section(title, char='-', width=40):
    """Print a section header."""
    print(f"\n{_style(title, 'title')}")
    print(_style(char * width, 'dim'))


def print_success(message):
    print(f"{_style('✓', 'ok')} {message}")


def print_error(message):
    print(_style(f"✗ {message}", 'fail'))


def print_warning(message):
    print(_style(f"⚠ {message}", 'warn'))


def print_info(message):
    print(f"{_style('→', 'note')} {message}")


def print_config(label, value):
    """Print a configuration key-value pair."""
    print(f"  {_style(label + ':', 'label')} {_style(value, 'dim')}")


def print_banner(version=None):
    """Print the GoesMapPy ASCII art banner."""
    from .. import __version__
    import pyfiglet

    ascii_art = pyfiglet.figlet_format('GoesMapPy', font='standard')
    print()
    for line in filter(str.strip, ascii_art.splitlines()):
        print(_style(line, 'note'))
    print()
    tagline = f"GoesMapPy v{version or __version__}  |  GOES MCMIP Visualizer"
    print(f"        {_style(tagline, 'dim')}")
    print()


def print_complete(message=None, elapsed_seconds=None):
    """Print a completion footer, with the run time when given."""
    rule = _style("=" * 60, 'ok')
    print()
    print(rule)
    print(f"  {_style(message or 'Done!', 'bold', 'ok')}")
    print(rule)
    if elapsed_seconds is not None:
        print()
        print(f"  {_style('Total time:', 'label')} {_style(f'{elapsed_seconds:.1f}s', 'ok')}")
    print()
