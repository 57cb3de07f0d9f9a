from pathlib import Path
from typing import Any, Dict, Optional

from rich.console import Console
from rich.pretty import Pretty

from ..utils.config import save_config, set_config_value

console = Console()


def handle_config(
    config: Dict[str, Any],
    config_path: Path,
    key: Optional[str] = None,
    value: Optional[str] = None,
) -> Dict[str, Any]:
    """Get or set config parameters; returns the (possibly updated) config."""
    if not key:
        console.print(Pretty(config))
        return config

    if value is None:
        console.print(config.get(key), soft_wrap=True, markup=False, highlight=False)
        return config

    updated = set_config_value(config, key, value)
    save_config(updated, config_path)
    if key in updated:
        console.print(
            f'Successfully set config key "{key}" to value "{updated[key]}"',
            soft_wrap=True, markup=False, highlight=False,
        )
    else:
        console.print(f'Successfully unset config key "{key}"', soft_wrap=True, markup=False, highlight=False)
    return updated
