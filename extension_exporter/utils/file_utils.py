# extension_exporter/utils/file_utils.py
"""File operation utilities"""


def format_size(size: int) -> str:
    """
    Format file size in human-readable format

    Args:
        size: Size in bytes

    Returns:
        Formatted size string
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size < 1024.0:
            return f"{size:.2f} {unit}"
        size /= 1024.0
    return f"{size:.2f} PB"


def format_mode(mode: int) -> str:
    """Format permission bits as a four digit octal string"""
    return f"{mode:04o}"
