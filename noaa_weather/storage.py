import json
import sys
from typing import Optional, Any


def to_json(data: Any) -> str:
    """JSON-представление модели (в формате API) или обычного dict."""
    if hasattr(data, "to_wire"):
        data = data.to_wire()
    return json.dumps(data, ensure_ascii=False, indent=2)


def write_output(content: str, path: Optional[str] = None) -> bool:
    """Записать результат в файл path или вывести в stdout."""
    if path is None:
        print(content)
        return True
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
            if not content.endswith("\n"):
                f.write("\n")
    except OSError as e:
        print(f"Не удалось сохранить результат в {path}: {e}", file=sys.stderr)
        return False
    return True
