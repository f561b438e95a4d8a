"""
Highlight and token dump commands.

These commands expose the classifier and the HTML renderer on the command
line so SQL example files can be turned into page fragments.
"""

import argparse
import json
from pathlib import Path

from ...highlight import HTMLRenderer
from ...lang import classify
from ...observability.logging import get_logger
from ..context import get_cli_context
from ..errors import CLIRuntimeError, handle_cli_exception, wrap_exception
from ..utils import collect_sql_sources, pluralize, read_source

logger = get_logger(__name__)


def cmd_highlight(args: argparse.Namespace) -> None:
    """
    Handle the 'highlight' subcommand.

    Renders every SQL source as an HTML fragment with ``<span>`` wrappers
    and prints the fragments, or writes them to ``--output``.

    Args:
        args: Parsed command-line arguments containing:
            - paths: Files, directories or '-' for stdin
            - wrap: Wrap each fragment in <pre><code>
            - output: Optional destination file

    Examples:
        >>> args = argparse.Namespace(paths=['query.sql'], wrap=False, output=None)
        >>> cmd_highlight(args)  # doctest: +SKIP
        <span class="keyword">SELECT</span> ...
    """
    try:
        ctx = get_cli_context(args)
        config = ctx.config
        renderer = HTMLRenderer(config.highlight.css_classes, wrap=args.wrap)
        keywords = config.keywords()
        functions = config.functions()

        fragments = []
        for source in collect_sql_sources(args.paths):
            tokens = classify(read_source(source), keywords, functions)
            logger.debug("Classified %s into %d tokens", source, len(tokens))
            fragments.append(renderer.render(tokens))

        output = "\n".join(fragments)
        if args.output:
            destination = Path(args.output)
            try:
                destination.write_text(output + "\n", encoding="utf-8")
            except OSError as exc:
                raise wrap_exception(
                    exc,
                    message=f"Could not write {destination}",
                    error_class=CLIRuntimeError,
                ) from exc
            count = len(fragments)
            print(f"Wrote {count} {pluralize('fragment', count)} to {destination}")
        else:
            print(output)

    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))


def cmd_tokens(args: argparse.Namespace) -> None:
    """
    Handle the 'tokens' subcommand.

    Prints the token stream of one SQL source, either as tab separated
    ``category<TAB>text`` lines (plain text shows as ``plain``; text is
    printed as a quoted literal so whitespace stays visible) or as JSON.
    """
    try:
        ctx = get_cli_context(args)
        sources = collect_sql_sources([args.path])
        tokens = []
        for source in sources:
            tokens.extend(classify(read_source(source), ctx.config.keywords(), ctx.config.functions()))

        if args.json:
            print(json.dumps([token.to_dict() for token in tokens], indent=2))
            return

        for token in tokens:
            label = token.category.value if token.category is not None else "plain"
            print(f"{label}\t{token.text!r}")

    except Exception as exc:
        handle_cli_exception(exc, verbose=getattr(args, "verbose", False))
