#!/usr/bin/env python3
"""
GoesMapPy - Command Line Interface

Build GOES MCMIP animations on Google Earth Engine from the terminal,
either through an interactive wizard or with command-line arguments.

Usage:
    goesmappy              # Interactive mode
    goesmappy --help       # Show help
"""

import sys
import time
from datetime import datetime

import questionary
from questionary import Style

from . import __version__
from .core.console import (
    suppress_warnings, print_banner, print_section, print_config,
    print_success, print_error, print_info, print_complete
)
from .core.utils import (
    GOES_SATELLITES, MCMIP_SCANS, get_mcmip_col_id, validate_time_range,
)

suppress_warnings()

CUSTOM_STYLE = Style([
    ('qmark', 'fg:cyan bold'),
    ('question', 'bold'),
    ('answer', 'fg:green bold'),
    ('pointer', 'fg:cyan bold'),
    ('highlighted', 'fg:cyan bold'),
    ('selected', 'fg:green'),
    ('separator', 'fg:gray'),
    ('instruction', 'fg:gray'),
    ('text', ''),
    ('disabled', 'fg:gray italic'),
])

COMPOSITES = {
    'land': {
        'display': 'True color (land)',
        'description': 'Reflectance stretched to 0-0.35, good for surface detail',
    },
    'cloud': {
        'display': 'True color (cloud)',
        'description': 'Full reflectance range with gamma 1.3, good for cloud tops',
    },
    'ntmicro': {
        'display': 'Nighttime Microphysics',
        'description': 'IR channel differences for fog and low cloud at night',
    },
}

OUTPUTS = {
    'url': 'Print an animated GIF URL',
    'gif': 'Download an animated GIF',
    'mp4': 'Export an MP4 video to Google Drive',
}

TIME_FORMAT = '%Y-%m-%dT%H:%M'


def validate_time(time_str: str) -> bool:
    """Validate time format YYYY-MM-DDTHH:MM."""
    try:
        datetime.strptime(time_str, TIME_FORMAT)
        return True
    except ValueError:
        return False


def parse_bbox(text: str):
    """Parse 'west,south,east,north' into four floats."""
    parts = [p for p in text.replace(' ', ',').split(',') if p]
    if len(parts) != 4:
        raise ValueError(f"bbox must be 'west,south,east,north', got '{text}'")
    return [float(p) for p in parts]


def parse_hours(text: str):
    """Parse 'start-end' UTC hours, e.g. '9-22'."""
    try:
        start, end = text.split('-')
        return [int(start), int(end)]
    except ValueError:
        raise ValueError(f"Hours must be 'start-end', e.g. 9-22, got '{text}'")


def run_job(config):
    """
    Build the collection and produce the requested output.

    ``config`` keys: project, satellite, scan, start, end, bbox or shapefile,
    composite, hours, step, fps, dimensions, states, output, out_gif,
    description, folder, wait.
    """
    from .cloud.auth import initialize_earth_engine
    from .cloud.collection import get_mcmip_col
    from .cloud.visualize import (
        TRUE_COLOR_LAND, TRUE_COLOR_CLOUD, visualize_mcmip, visualize_nt_micro,
        get_states_overlay, add_overlay,
    )
    from .cloud.regions import region_from_bbox, region_from_shapefile
    from .cloud.export import get_gif_url, download_gif, export_mp4, wait_for_task

    if not initialize_earth_engine(config['project']):
        raise RuntimeError("Failed to initialize Earth Engine")

    col_id = get_mcmip_col_id(config['satellite'], config['scan'])
    start, end = validate_time_range(config['start'], config['end'])

    if config.get('shapefile'):
        region = region_from_shapefile(config['shapefile'])
    else:
        region = region_from_bbox(config['bbox'])

    print_info(f"Building {col_id} collection...")
    col = get_mcmip_col(col_id, start, end, {
        'filterHours': config.get('hours'),
        'step': config.get('step'),
    })

    if config['composite'] == 'ntmicro':
        rgb = visualize_nt_micro(col)
    else:
        vis = TRUE_COLOR_CLOUD if config['composite'] == 'cloud' else TRUE_COLOR_LAND
        rgb = visualize_mcmip(col, {'visParams': vis})

    if config.get('states'):
        rgb = add_overlay(rgb, get_states_overlay())

    video_params = {
        'framesPerSecond': config.get('fps'),
        'dimensions': config.get('dimensions'),
    }

    output = config['output']
    if output == 'url':
        url = get_gif_url(rgb, region, video_params)
        print_success(f"Animated GIF URL: {url}")
    elif output == 'gif':
        download_gif(rgb, region, config['out_gif'], video_params)
    elif output == 'mp4':
        video_params.update({
            'description': config.get('description'),
            'folder': config.get('folder'),
        })
        task = export_mp4(rgb, region, video_params)
        if config.get('wait'):
            wait_for_task(task)
    else:
        raise ValueError(f"Unknown output '{output}'. Valid options: {', '.join(OUTPUTS)}")


def run_interactive():
    """Run the interactive CLI."""
    print_banner()
    print_info("Welcome to GoesMapPy Interactive Mode!")
    print_info("Press Ctrl+C at any time to cancel.")
    print()

    try:
        # =====================================================================
        # Google Earth Engine Project
        # =====================================================================
        print_section("Google Earth Engine Configuration")

        from .cloud.auth import resolve_project
        project = questionary.text(
            "Enter your GEE project name:",
            instruction="(e.g., ee-myproject)",
            default=resolve_project() or "",
            style=CUSTOM_STYLE,
            validate=lambda x: len(x) > 0 or "Project name is required"
        ).ask()
        if project is None:
            return 1

        # =====================================================================
        # Imagery
        # =====================================================================
        print()
        print_section("Imagery")

        satellite = questionary.select(
            "Select GOES satellite:",
            choices=[str(s) for s in GOES_SATELLITES],
            default="16",
            style=CUSTOM_STYLE,
        ).ask()
        if satellite is None:
            return 1

        scan = questionary.select(
            "Select ABI scan sector:",
            choices=[questionary.Choice(title=v, value=k) for k, v in MCMIP_SCANS.items()],
            default="C",
            style=CUSTOM_STYLE,
        ).ask()
        if scan is None:
            return 1

        composite = questionary.select(
            "Select composite:",
            choices=[
                questionary.Choice(title=f"{v['display']} - {v['description']}", value=k)
                for k, v in COMPOSITES.items()
            ],
            default="land",
            style=CUSTOM_STYLE,
            instruction="(use arrow keys)"
        ).ask()
        if composite is None:
            return 1

        # =====================================================================
        # Time Range and Region
        # =====================================================================
        print()
        print_section("Time Range and Region")

        start = questionary.text(
            "Enter start time (UTC):",
            instruction="(YYYY-MM-DDTHH:MM)",
            style=CUSTOM_STYLE,
            validate=lambda x: validate_time(x) or "Invalid format. Use YYYY-MM-DDTHH:MM"
        ).ask()
        if start is None:
            return 1

        end = questionary.text(
            "Enter end time (UTC):",
            instruction="(YYYY-MM-DDTHH:MM)",
            style=CUSTOM_STYLE,
            validate=lambda x: validate_time(x) or "Invalid format. Use YYYY-MM-DDTHH:MM"
        ).ask()
        if end is None:
            return 1

        if datetime.strptime(start, TIME_FORMAT) >= datetime.strptime(end, TIME_FORMAT):
            print_error("Start time must be before end time!")
            return 1

        def _valid_bbox(text):
            try:
                parse_bbox(text)
                return True
            except ValueError as e:
                return str(e)

        bbox = questionary.text(
            "Enter region bounding box:",
            instruction="(west,south,east,north in degrees)",
            style=CUSTOM_STYLE,
            validate=_valid_bbox
        ).ask()
        if bbox is None:
            return 1

        # =====================================================================
        # Output
        # =====================================================================
        print()
        print_section("Output")

        output = questionary.select(
            "Select output:",
            choices=[questionary.Choice(title=v, value=k) for k, v in OUTPUTS.items()],
            default="url",
            style=CUSTOM_STYLE,
        ).ask()
        if output is None:
            return 1

        out_gif = None
        if output == 'gif':
            out_gif = questionary.path(
                "Save GIF as:",
                default="goes.gif",
                style=CUSTOM_STYLE,
                validate=lambda x: x.lower().endswith('.gif') or "File must end in .gif"
            ).ask()
            if out_gif is None:
                return 1

        states = questionary.confirm(
            "Overlay state boundaries?",
            default=False,
            style=CUSTOM_STYLE
        ).ask()

        config = {
            'project': project,
            'satellite': int(satellite),
            'scan': scan,
            'start': start,
            'end': end,
            'bbox': parse_bbox(bbox),
            'composite': composite,
            'states': states,
            'output': output,
            'out_gif': out_gif,
        }

        # =====================================================================
        # Confirmation
        # =====================================================================
        print()
        print_section("Configuration Summary")
        print_config("GEE Project", project)
        print_config("Collection", get_mcmip_col_id(satellite, scan))
        print_config("Time Range", f"{start} to {end}")
        print_config("Region", bbox)
        print_config("Composite", COMPOSITES[composite]['display'])
        print_config("Output", OUTPUTS[output])
        print()

        if not questionary.confirm("Proceed?", default=True, style=CUSTOM_STYLE).ask():
            print_info("Cancelled.")
            return 0

        start_time = time.time()
        run_job(config)
        print_complete(elapsed_seconds=time.time() - start_time)
        return 0

    except KeyboardInterrupt:
        print()
        print_info("Cancelled by user.")
        return 1
    except Exception as e:
        print()
        print_error(f"Error: {e}")
        return 1


def build_parser():
    import argparse

    parser = argparse.ArgumentParser(
        prog='goesmappy',
        description=f"GoesMapPy v{__version__} - GOES MCMIP animations on Google Earth Engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Interactive Mode:
  goesmappy                    Launch interactive wizard

Command-Line Mode:
  goesmappy -p PROJECT --start TIME --end TIME --bbox W S E N [options]

Examples:
  goesmappy -p ee-myproject --scan C --start 2021-08-29T12:00 --end 2021-08-29T20:00 \\
      --bbox -97 24 -84 33 --composite cloud --states
  goesmappy -p ee-myproject --start 2021-08-30T02:00 --end 2021-08-30T10:00 \\
      --bbox -97 24 -84 33 --composite ntmicro --output mp4 --wait
        """
    )

    parser.add_argument('-p', '--project', type=str, help='GEE project name (default: $EE_PROJECT or $GOOGLE_CLOUD_PROJECT)')
    parser.add_argument('--satellite', type=int, choices=GOES_SATELLITES, default=16,
                        help='GOES satellite (default: 16)')
    parser.add_argument('--scan', type=str, choices=list(MCMIP_SCANS), default='F',
                        help='ABI scan: F full disk, C CONUS, M mesoscale (default: F)')
    parser.add_argument('--start', type=str, help='Start time, UTC (YYYY-MM-DDTHH:MM)')
    parser.add_argument('--end', type=str, help='End time, UTC (YYYY-MM-DDTHH:MM)')
    parser.add_argument('--bbox', nargs=4, type=float, metavar=('W', 'S', 'E', 'N'),
                        help='Region as west south east north, in degrees')
    parser.add_argument('-s', '--shapefile', type=str, help='Region from a shapefile')
    parser.add_argument('-c', '--composite', choices=list(COMPOSITES), default='land',
                        help='Composite (default: land)')
    parser.add_argument('--hours', type=parse_hours, help='Daily UTC hour window, e.g. 9-22')
    parser.add_argument('--step', type=int, help='Keep every n-th image')
    parser.add_argument('--fps', type=int, default=10, help='Frames per second (default: 10)')
    parser.add_argument('--dimensions', type=int, default=512, help='Output size in pixels (default: 512)')
    parser.add_argument('--states', action='store_true', help='Overlay state boundaries')
    parser.add_argument('-o', '--output', choices=list(OUTPUTS), default='url',
                        help='Output type (default: url)')
    parser.add_argument('--out-gif', type=str, default='goes.gif', help='GIF path for --output gif')
    parser.add_argument('--description', type=str, help='Drive export task description')
    parser.add_argument('--folder', type=str, help='Drive folder for --output mp4')
    parser.add_argument('--wait', action='store_true', help='Wait for the Drive export to finish')
    parser.add_argument('--version', action='version', version=f'GoesMapPy v{__version__}')
    return parser


def run_cli(argv=None):
    """Main entry point for the CLI."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        return run_interactive()

    args = build_parser().parse_args(argv)

    from .cloud.auth import resolve_project
    project = resolve_project(args.project)

    missing = [name for name, value in (
        ('project', project), ('start', args.start), ('end', args.end),
    ) if value is None]
    if args.bbox is None and args.shapefile is None:
        missing.append('bbox or shapefile')

    if missing:
        print_error(f"Missing required arguments: {', '.join(missing)}")
        print_info("Run 'goesmappy' without arguments for interactive mode")
        print_info("Or use 'goesmappy --help' for usage information")
        return 1

    config = dict(vars(args))
    config['project'] = project

    print_banner()
    start_time = time.time()

    try:
        run_job(config)
    except Exception as e:
        print_error(f"Failed: {e}")
        return 1

    print_complete(elapsed_seconds=time.time() - start_time)
    return 0


def main():
    """Entry point for the goesmappy command."""
    sys.exit(run_cli())


if __name__ == "__main__":
    main()
