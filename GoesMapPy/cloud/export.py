"""
Animation Output
================

Render GOES visualization collections as animated GIFs or MP4 videos.

    - Animated GIF URLs from Earth Engine's video thumbnail service
    - Inline notebook display and local download of the GIF
    - MP4 export to Google Drive as a batch task

Authors: GoesMapPy contributors
Version: 0.1.0
"""

import os
import time

import ee
import geemap
from IPython import get_ipython
from IPython.display import Image, display

from ..core.params import update_params
from ..core.console import print_info, print_success, print_warning


# Options handled here rather than by ee.ImageCollection.getVideoThumbURL.
LOCAL_KEYS = ('printUrl',)


def _gif_params(region, params):
    return update_params(params, {
        'dimensions': 512,
        'region': region,
        'framesPerSecond': 10,
        'crs': 'EPSG:3857',
    })


def _thumb_args(_params):
    return {k: v for k, v in _params.items() if k not in LOCAL_KEYS and v is not None}


def get_gif_url(col, region, params=None):
    """
    Return the URL of a GOES animated time series GIF.

    Parameters
    ----------
    col : ee.ImageCollection
        A GOES RGB visualization image collection.
    region : ee.Geometry
        Region to render.
    params : dict, optional
        Arguments for ``ee.ImageCollection.getVideoThumbURL``; defaults are
        512 px dimensions, 10 frames per second and EPSG:3857.

    Returns
    -------
    str
    """
    _params = _gif_params(region, params)
    return col.getVideoThumbURL(_thumb_args(_params))


def _in_notebook():
    shell = get_ipython()
    if shell is None:
        return False
    # Jupyter and Colab kernels both run under an IPKernelApp.
    return (
        shell.__class__.__name__ == 'ZMQInteractiveShell'
        or 'google.colab' in type(shell).__module__
        or 'IPKernelApp' in getattr(shell, 'config', {})
    )


def show_gif(col, region, params=None):
    """
    Show a GOES animated time series GIF.

    In a Jupyter notebook the animation is displayed inline (to save it,
    right-click and "Save image as"). Elsewhere the URL is printed.

    Parameters
    ----------
    col : ee.ImageCollection
        A GOES RGB visualization image collection.
    region : ee.Geometry
        Region to render.
    params : dict, optional
        As for ``get_gif_url``, plus ``printUrl`` to also print the URL
        when displaying inline.

    Returns
    -------
    str
        The GIF URL.
    """
    _params = update_params(params, {'printUrl': False})
    url = get_gif_url(col, region, _params)

    if _in_notebook():
        print('Animated GIF (to save, right-click and "Save image as")')
        display(Image(url=url))
        if _params['printUrl']:
            print('Animated GIF URL')
            print(url)
    else:
        print_info(f"Animated GIF URL: {url}")

    return url


def download_gif(col, region, out_gif, params=None, verbose=True):
    """
    Download a GOES animated time series GIF to a local file.

    Parameters
    ----------
    col : ee.ImageCollection
        A GOES RGB visualization image collection.
    region : ee.Geometry
        Region to render.
    out_gif : str
        Output path, must end in '.gif'.
    params : dict, optional
        As for ``get_gif_url``.

    Returns
    -------
    str
        Absolute path of the written GIF.
    """
    if not out_gif.lower().endswith('.gif'):
        raise ValueError(f"Output file must have a .gif extension: {out_gif}")

    out_gif = os.path.abspath(out_gif)
    out_dir = os.path.dirname(out_gif)
    os.makedirs(out_dir, exist_ok=True)

    _params = _gif_params(region, params)
    _params['format'] = 'gif'

    if verbose:
        print_info(f"Generating GIF {os.path.basename(out_gif)}...")
    geemap.download_ee_video(col, _thumb_args(_params), out_gif)

    if not os.path.exists(out_gif):
        raise RuntimeError(f"GIF download failed, no file written to {out_gif}")
    if verbose:
        print_success(f"GIF saved to: {out_gif}")
    return out_gif


def export_mp4(col, region, params=None, start=True, verbose=True):
    """
    Export a GOES animated time series video to Google Drive as MP4.

    Parameters
    ----------
    col : ee.ImageCollection
        A GOES RGB visualization image collection.
    region : ee.Geometry
        Region to render.
    params : dict, optional
        Arguments for ``ee.batch.Export.video.toDrive``. Defaults:
        description 'GOES Video', Drive root folder, file name prefix
        'goes_video', 512 px, 10 frames per second, EPSG:3857.
    start : bool
        Start the task before returning it.

    Returns
    -------
    ee.batch.Task
    """
    _params = update_params(params, {
        'collection': col,
        'description': 'GOES Video',
        'folder': '',
        'fileNamePrefix': 'goes_video',
        'dimensions': 512,
        'region': region,
        'framesPerSecond': 10,
        'crs': 'EPSG:3857',
    })

    # Task descriptions may not contain spaces.
    _params['description'] = str(_params['description']).replace(' ', '_')
    kwargs = {k: v for k, v in _params.items() if v is not None and v != ''}

    try:
        task = ee.batch.Export.video.toDrive(**kwargs)
        if start:
            task.start()
    except ee.EEException as e:
        raise RuntimeError(f"Failed to start Drive video export: {e}") from e

    if verbose and start:
        print_success(
            f"Started Drive export '{kwargs['description']}' "
            f"-> folder={kwargs.get('folder', '(root)')} prefix={kwargs['fileNamePrefix']}"
        )
    return task


def wait_for_task(task, poll_interval=10, timeout=3600, verbose=True):
    """
    Poll an Earth Engine batch task until it finishes.

    Returns
    -------
    dict
        The final ``task.status()`` on completion.

    Raises
    ------
    RuntimeError
        If the task fails or is cancelled.
    TimeoutError
        If the task does not finish within ``timeout`` seconds; the task
        is cancelled first.
    """
    start_time = time.time()
    last_state = None

    while True:
        status = task.status() or {}
        state = status.get('state')

        if verbose and state != last_state:
            print_info(f"Task {status.get('description', '')}: {state}")
            last_state = state

        if state == 'COMPLETED':
            if verbose:
                print_success("Export completed")
            return status
        if state in ('FAILED', 'CANCELLED'):
            raise RuntimeError(
                f"Export task {state.lower()}: {status.get('error_message', status)}"
            )

        if time.time() - start_time > timeout:
            if verbose:
                print_warning("Export timed out, cancelling task")
            task.cancel()
            raise TimeoutError(
                f"Export did not complete within {timeout} seconds; last status: {status}"
            )

        time.sleep(poll_interval)
