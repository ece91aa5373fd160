"""
Utility functions for the Polygon Edge Calculator
Version information and window/about text helpers
"""

APPLICATION_NAME = "Polygon Edge Calculator"
APPLICATION_VERSION = "1.0.0"
ORGANIZATION_NAME = "Polygon Tools"


def get_version_info():
    """
    Get version information

    Returns:
        dict: Version information dictionary
    """
    return {
        'version': APPLICATION_VERSION,
    }


def get_application_title():
    """
    Get the application title with version information

    Returns:
        str: Application title string
    """
    version_info = get_version_info()
    return f"{APPLICATION_NAME} v{version_info['version']}"


def get_about_text():
    """
    Get formatted about text for the application

    Returns:
        str: Formatted about text
    """
    version_info = get_version_info()

    about_text = f"""{APPLICATION_NAME}
Version: {version_info['version']}

Computes the length of every edge of a closed polygon
and its total perimeter from a list of points."""

    return about_text
