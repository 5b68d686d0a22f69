"""Layout conversion between platforms."""

from layoutsync.convert.mobile import convert_desktop_content_to_mobile

__all__ = ["convert_desktop_content_to_mobile"]
