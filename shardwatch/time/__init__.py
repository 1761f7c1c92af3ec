from .clock import format_clock, format_duration, parse_duration, project_clock

__all__ = ["format_clock", "format_duration", "parse_duration", "project_clock"]
