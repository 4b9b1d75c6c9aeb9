from .lcov import render_record, render_records

__all__ = ["render_record", "render_records"]
