"""
Deploy a script to a list of hosts.

Shows how an entry point declares its flags, parses `sys.argv`, and maps a
repeatable `-v` counter onto logging levels. Nothing is actually deployed.

    python examples/deploy_demo.py -rvv -T 8 hack.js n00dles foodnstuff
    python examples/deploy_demo.py --help
"""
import logging
import sys

from rich.console import Console

from flagparse import FlagParser

console = Console()


def get_parser() -> FlagParser:
    parser = FlagParser(
        program="deploy",
        description="Deploy a given script with the given arguments",
        usage="SCRIPT [HOSTS...]",
    )
    parser.flag("redeploy").short_opt("r").help("Kill and restart running copies")
    parser.number("max-threads").short_opt("T").default("-1").help(
        "Maximum threads to use, or -1 for unlimited"
    )
    parser.counter("verbose").short_opt("v").help("Increase logging output")
    parser.flag("quiet").short_opt("q").help("Only log errors")
    return parser


def log_level(verbose: int, quiet: bool) -> int:
    if quiet:
        return logging.ERROR
    if verbose >= 2:
        return logging.DEBUG
    if verbose == 1:
        return logging.INFO
    return logging.WARNING


def main(argv: list[str]) -> int:
    parser = get_parser()
    result = parser.parse_or_exit(argv)
    logging.basicConfig(level=log_level(result["verbose"], result["quiet"]))
    logging.getLogger("flagparse").setLevel(logging.WARNING)

    if not result.positionals:
        parser.print_help("Not enough arguments; require script name")
        return 1

    script, *hosts = result.positionals
    threads = result["max-threads"]
    for host in hosts or ["home"]:
        logging.info("Deploying %s to %s", script, host)
        console.print(
            f"[bold]{script}[/bold] -> {host} "
            f"(threads={'max' if threads < 0 else int(threads)}, "
            f"redeploy={result['redeploy']})"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
