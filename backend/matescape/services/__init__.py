"""
Services Layer

Pure tournament engine logic that:
- Accepts tournament sequences and filter values
- Returns plain results (lists, dicts, dataclasses)
- Does NOT depend on HTTP request/response objects
- Does NOT read or mutate shared store state
"""
