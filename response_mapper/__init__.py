"""Core logic for mapping external API responses onto internal fields.

The Gradio UI lives in `app.py`. This package contains pure functions that:
- enumerate addressable paths in a sample response
- tell keyed JSON apart from positional arrays
- resolve dot/bracket paths and positional indices
- evaluate a field mapping into per-entity records
"""
