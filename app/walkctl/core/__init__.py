"""Core configuration support: XDG paths and persistent run defaults."""
