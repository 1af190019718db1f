import json

import click

from regex_to_nfa_core import build_machine_json, compile_regex, format_transitions

QUIT_WORDS = (":q", "QUIT")

BANNER = (
    "Enter a regular expression with the alphabet ['a','z'] & E for empty\n"
    "* for Kleene Star\n"
    "elements with nothing between them indicates concatenation\n"
    "| for Union\n"
    '":q" to quit'
)


@click.command()
@click.argument("source", type=click.File("r"), default="-")
@click.option("--json", "as_json", is_flag=True, help="Print each NFA as JSON.")
@click.option("--quiet", "-q", is_flag=True, help="Do not print the banner.")
def main(source, as_json, quiet):
    """Compile regular expressions read line by line from SOURCE (stdin by default)."""
    if not quiet:
        click.echo(BANNER)
    for line in source:
        line = line.rstrip("\r\n")
        if line in QUIT_WORDS:
            break
        result = compile_regex(line)
        if not result.ok:
            click.echo(f"Error [{result.error.kind}]: {result.error}", err=True)
            continue
        if as_json:
            click.echo(json.dumps(build_machine_json(result.automaton)))
        else:
            click.echo(format_transitions(result.automaton))


if __name__ == "__main__":
    main()
