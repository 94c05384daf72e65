# Flagparse — (c) 2025 rtj.dev LLC — MIT Licensed
"""Default console used to render help when a parser is not given its own."""
from rich.console import Console

console = Console()
