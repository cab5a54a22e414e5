"""Utility functions for the Duplicate Scan Tool."""

from .channel import Channel, ChannelClosed
from .fanout import fan_out
from .path import is_hidden, relative_path

__all__ = ['Channel', 'ChannelClosed', 'fan_out', 'is_hidden', 'relative_path']
