# twisty_sim/render/player_page.py
from __future__ import annotations

import html
from typing import Optional

from twisty_sim.config import (
    DEFAULT_THEME,
    PLAYER_OPTIONS,
    TIMELINE_FAILED_MESSAGE,
    TWISTY_MODULE_URL,
)
from twisty_sim.logic.moves import PuzzleVariant

PLAYER_ID = "player"

# True cuando el elemento existe, está registrado y expone jumpToEnd()
READY_CHECK_JS = f"""
(function () {{
  const p = document.getElementById("{PLAYER_ID}");
  return !!(p && window.customElements.get("twisty-player")
            && typeof p.jumpToEnd === "function");
}})();
"""

JUMP_TO_END_JS = f"""
(function () {{
  const p = document.getElementById("{PLAYER_ID}");
  if (!p || typeof p.jumpToEnd !== "function") {{ return "unavailable"; }}
  try {{ p.jumpToEnd(); return "ok"; }} catch (e) {{ return "error: " + e.message; }}
}})();
"""

PAGE_TEMPLATE = """<!DOCTYPE html>
<html data-theme="{theme}">
<head>
<meta charset="utf-8">
<script type="module" src="{module_url}"></script>
<style>
  html, body {{ margin: 0; height: 100%; overflow: hidden; }}
  html[data-theme="dark"] body {{ background: #15151c; }}
  html[data-theme="light"] body {{ background: #f2f2f7; }}
  twisty-player {{ width: 100%; height: 100%; }}
</style>
</head>
<body>
<twisty-player {attrs}></twisty-player>
</body>
</html>
"""


def build_player_html(variant: PuzzleVariant, algorithm: str, theme: str = DEFAULT_THEME) -> str:
    """Construye la página HTML con un `<twisty-player>` configurado.

    Args:
        variant: Puzzle a mostrar (su valor es el id de cubing.js).
        algorithm: Secuencia de movimientos separada por espacios ("" = resuelto).
        theme: "dark" o "light".

    Returns:
        Documento HTML completo.
    """
    options = {"id": PLAYER_ID, "puzzle": PuzzleVariant(variant).value, "alg": algorithm}
    options.update(PLAYER_OPTIONS)
    attrs = " ".join(f'{k}="{html.escape(v, quote=True)}"' for k, v in options.items())
    return PAGE_TEMPLATE.format(
        theme=html.escape(theme, quote=True),
        module_url=TWISTY_MODULE_URL,
        attrs=attrs,
    )


def jump_failure_message(result) -> Optional[str]:
    """Traduce el resultado de `JUMP_TO_END_JS` a un aviso para el usuario.

    Args:
        result: Valor devuelto por el script ("ok", "unavailable", "error: ...")
            o None si la página no respondió.

    Returns:
        None si el salto funcionó; en otro caso el texto del aviso.
    """
    if result == "ok":
        return None
    return TIMELINE_FAILED_MESSAGE
