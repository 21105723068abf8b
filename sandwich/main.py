# -----------------------------------------------------------------------------
# SANDWICH KITCHEN - DRIVER
# -----------------------------------------------------------------------------
# Responsibility: Wires config, technology and recipe book together, cooks
# once and prints the outcome as `sandwich: <value-or-error>`.
#
# Run from project root:
#   python -m sandwich.main
#   SANDWICH_INTERPRETER=faulty python -m sandwich.main
# -----------------------------------------------------------------------------

import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Load environment variables from .env
from dotenv import load_dotenv

load_dotenv(PROJECT_ROOT / ".env")

from rich.console import Console
from rich.panel import Panel

from sandwich.core.kitchen import Kitchen, KitchenConfigError, load_config
from sandwich.core.recipes import RecipeNotFoundError

console = Console()


def main() -> int:
    """Cook the configured recipe. Returns the process exit code."""
    config = load_config()
    console.print(
        f"[bold green]SANDWICH KITCHEN ONLINE.[/bold green] Interpreter: {config.interpreter}"
    )

    try:
        kitchen = Kitchen.from_config(config)
        result = kitchen.cook(config.recipe)
    except (KitchenConfigError, RecipeNotFoundError) as e:
        console.print(Panel(f"[bold red]{e}[/bold red]", title="KITCHEN HALT", border_style="red"))
        return 1

    print(f"sandwich: {result}")
    return 0 if result.is_success else 1


if __name__ == "__main__":
    sys.exit(main())
