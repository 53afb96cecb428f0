"""Command-line entry point for the demo dashboard."""

import argparse
import logging
import shutil


def wrap_green(text):
    """Wrap text in ANSI green color codes."""
    return f"\033[92m{text}\033[00m"


class CustomHelpFormatter(argparse.HelpFormatter):
    """Help formatter that annotates each option with its type and default."""

    def __init__(self, prog, indent_increment=2, max_help_position=30, width=None):
        if width is None:
            width = shutil.get_terminal_size().columns
        max_help_position = min(30, width // 3)
        super().__init__(prog, indent_increment, max_help_position, width)

    def _format_usage(self, usage, actions, groups, prefix):
        return ""

    def _format_action_invocation(self, action):
        if not action.option_strings or action.nargs == 0:
            return super()._format_action_invocation(action)
        return f"{', '.join(action.option_strings)} <value>"

    def _get_help_string(self, action):
        help_text = action.help or ""

        if action.type is not None and hasattr(action.type, "__name__"):
            help_text = f"({wrap_green(action.type.__name__)}) {help_text}"
        elif isinstance(action, (argparse._StoreTrueAction, argparse._StoreFalseAction)):
            help_text = f"({wrap_green('bool')}) {help_text}"

        if action.choices is not None:
            choice_str = ", ".join(str(c) for c in action.choices)
            help_text = f"{help_text} (choices: {choice_str})"

        if action.default is not argparse.SUPPRESS and action.dest != "help":
            help_text = f"{help_text} (default: {action.default})"

        return help_text


def non_negative_int(value):
    """Parse a non-negative integer argument."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"expected a non-negative integer, got {value}")
    return number


def positive_float(value):
    number = float(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive number, got {value}")
    return number


def create_parser():
    """Create the argument parser for the demo dashboard."""
    parser = argparse.ArgumentParser(
        prog="ringgraph",
        description="Scrolling braille graphs in the terminal",
        formatter_class=CustomHelpFormatter,
    )

    group = parser.add_argument_group("graph")
    group.add_argument(
        "--interval",
        type=positive_float,
        default=1.0,
        help="Seconds between samples",
    )
    group.add_argument(
        "--ceiling",
        type=non_negative_int,
        default=100,
        help="Fixed scale ceiling; 0 selects auto-scale",
    )
    group.add_argument(
        "--auto-scale",
        action="store_true",
        default=False,
        help="Scale against the largest visible sample instead of the ceiling",
    )
    group.add_argument(
        "--width",
        type=non_negative_int,
        default=100,
        help="Number of samples kept before the first resize",
    )
    group.add_argument(
        "--no-border",
        action="store_true",
        default=False,
        help="Draw the graphs without a border",
    )

    group = parser.add_argument_group("logging")
    group.add_argument(
        "--log-lines",
        type=non_negative_int,
        default=3,
        help="Number of log lines shown under the graphs",
    )
    group.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Show debug logs under the graphs",
    )
    return parser


def main(argv=None):
    """Parse arguments and run the dashboard."""
    args = create_parser().parse_args(argv)

    logger = logging.getLogger("ringgraph")
    logger.setLevel(logging.DEBUG if args.debug else logging.INFO)

    from .interface import GraphDashboard

    dashboard = GraphDashboard(
        interval=args.interval,
        ceiling=args.ceiling,
        auto_scale=args.auto_scale or args.ceiling == 0,
        border=not args.no_border,
        initial_width=args.width,
        max_log_lines=args.log_lines,
    )
    dashboard.run()
    return 0
