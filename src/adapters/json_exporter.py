"""Exportación JSON de resultados de comandos.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines (jq, CI).
- Permite guardar la respuesta del backend sin depender de la salida Rich.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

_ANY = TypeAdapter(Any)


def export_result_json(*, result: Any, output_path: Path) -> Path:
    """Exporta un resultado (modelo, lista de modelos, dict) a JSON UTF-8 estable.

    Los modelos se vuelcan con sus alias, es decir, con los nombres del backend.
    """

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = _ANY.dump_python(result, mode="json", by_alias=True)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
