"""
Google Earth Engine Authentication
===================================

Handle GEE authentication and session initialization with proper
error handling and re-authentication support.

Authors: GoesMapPy contributors
Version: 0.1.0
"""

import os

import ee

from ..core.console import print_success, print_info, print_error


# Environment variables checked, in order, when no project is given.
PROJECT_ENV_VARS = ('EE_PROJECT', 'GOOGLE_CLOUD_PROJECT')


def resolve_project(project_name=None):
    """Return ``project_name`` or the first project found in the environment."""
    if project_name:
        return project_name
    for var in PROJECT_ENV_VARS:
        value = os.environ.get(var)
        if value:
            return value
    return None


def _initialize(project_name, opt_url):
    kwargs = {'project': project_name}
    if opt_url:
        kwargs['opt_url'] = opt_url
    ee.Initialize(**kwargs)


def initialize_earth_engine(project_name=None, force_auth=False, opt_url=None):
    """
    Initialize Google Earth Engine with project authentication.

    Handles three scenarios:
        1. Already authenticated - use existing credentials
        2. Credentials missing or stale - trigger browser authentication flow
        3. Project misconfigured - report and return False

    Args:
        project_name: GEE project ID (e.g., 'ee-myproject'). Falls back to
            the EE_PROJECT or GOOGLE_CLOUD_PROJECT environment variables.
        force_auth: Force re-authentication even if credentials exist
        opt_url: Alternative API endpoint, e.g. the high-volume endpoint.
            Leave unset for Drive exports, which the high-volume endpoint
            does not serve.

    Returns:
        True if initialization successful, False otherwise
    """
    project_name = resolve_project(project_name)
    if not project_name:
        print_error("No Earth Engine project given.")
        print_info("Pass a project or set EE_PROJECT / GOOGLE_CLOUD_PROJECT.")
        return False

    if not force_auth:
        try:
            _initialize(project_name, opt_url)
            print_success(f"Earth Engine initialized with project: {project_name}")
            return True
        except ee.EEException:
            # Missing or expired credentials; authenticate below.
            pass

    print_info("Authenticating with Google Earth Engine...")
    print_info("A browser window will open for authentication.")
    print()

    try:
        ee.Authenticate(auth_mode='browser', force=force_auth)
        _initialize(project_name, opt_url)

        print_success(f"Earth Engine authenticated and initialized with project: {project_name}")
        return True

    except ee.EEException as e:
        error_msg = str(e)

        if "not registered" in error_msg.lower() or "not found" in error_msg.lower():
            print_error(f"Project '{project_name}' not found or not registered for Earth Engine.")
            print_error("Please verify your project ID at: https://console.cloud.google.com/")
            print_error("Make sure Earth Engine API is enabled for your project.")
        elif "quota" in error_msg.lower():
            print_error("Earth Engine quota exceeded. Please try again later.")
        elif "permission" in error_msg.lower():
            print_error(f"No permission to access project '{project_name}'.")
            print_error("Make sure you have the correct permissions.")
        else:
            print_error(f"Earth Engine error: {error_msg}")

        return False
