"""Export: write rendered fragments and optional sidecar JSON to the destination tree"""

import json
from pathlib import Path

from mdpress.core.models import Fragment, Tag


def build_sidecar(fragment: Fragment) -> dict:
    """Build the sidecar JSON dict: source path plus the template metadata, JSON-safe."""
    meta = {}
    for key, value in fragment.metadata.items():
        if hasattr(value, "isoformat"):
            value = value.isoformat()
        elif isinstance(value, (list, tuple)):
            value = [v.model_dump() if isinstance(v, Tag) else v for v in value]
        meta[key] = value
    return {"file": fragment.file, "output": fragment.output, "metadata": meta}


def write_fragment(fragment: Fragment, emit_json: bool = False) -> Path:
    """Write the fragment HTML to its output path, creating parent directories.

    With emit_json, a `<name>.json` sidecar is written next to the page.
    Returns the HTML path.
    """
    out = Path(fragment.output)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(fragment.data, encoding='utf-8')
    if emit_json:
        out.with_suffix('.json').write_text(
            json.dumps(build_sidecar(fragment), indent=2, ensure_ascii=False),
            encoding='utf-8',
        )
    return out
