"""
Click command class that remembers option order.

Click groups the values of a repeated option together, which loses how
--text and --file occurrences were interleaved. OrderedInputCommand
records the parser's occurrence order in ``ctx.meta`` so inputs can be
resolved back into command-line order.
"""

from __future__ import annotations

import click

INPUT_ORDER_KEY = "hashtool.input_order"


class OrderedInputCommand(click.Command):
    """A click.Command that logs parameter names in occurrence order."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        parser = self.make_parser(ctx)
        _, _, param_order = parser.parse_args(args=list(args))
        ctx.meta[INPUT_ORDER_KEY] = [param.name for param in param_order]
        return super().parse_args(ctx, args)


def get_input_order(ctx: click.Context) -> list[str]:
    """Parameter names in the order they appeared on the command line."""
    return list(ctx.meta.get(INPUT_ORDER_KEY, []))
