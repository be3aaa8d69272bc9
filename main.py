"""主程序入口 - 交互式命令行计算器"""
import argparse
import logging
import sys

from config.config import (
    ASSOCIATIVITY_CHOICES, CALCULATOR_CONFIG, CLI_CONFIG, LOG_LEVEL_CHOICES, LOGGING_CONFIG,
    validate_config
)
from core import CalculatorError, calculate_verbose
from utils.formatting import format_result, format_trace

logger = logging.getLogger(__name__)


def evaluate_line(line, verbose=False, associativity=None):
    """对一行输入求值，返回要打印的文本；错误向上抛出"""
    trace = calculate_verbose(line, associativity)
    if verbose:
        return format_trace(trace)
    return format_result(trace.result)


def is_exit_command(line):
    return line.strip().lower() == CLI_CONFIG["exit_command"]


def run_repl(verbose=False, associativity=None, stdin=None, stdout=None, stderr=None):
    """
    逐行读取并求值，直到 exit 或输入结束
    单行出错只打印错误，不退出循环
    Returns:
        出错的行数
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr

    print(CLI_CONFIG["banner"] + "\n", file=stdout)
    print(CLI_CONFIG["exit_hint"], file=stdout)

    errors = 0
    while True:
        stdout.write("\n" + CLI_CONFIG["prompt"])
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        if is_exit_command(line):
            break
        if not line.strip():
            continue

        try:
            print(evaluate_line(line, verbose, associativity), file=stdout)
        except CalculatorError as e:
            errors += 1
            logger.debug(f"Failed to evaluate {line.strip()!r}: {type(e).__name__}")
            print(f"Error: {e}", file=stderr)

    return errors


def main(args):
    validate_config()
    verbose = args.verbose or (args.mode or "").lower() == CLI_CONFIG["verbose_keyword"]
    associativity = args.associativity or CALCULATOR_CONFIG["associativity"]
    logger.debug(f"verbose={verbose}, associativity={associativity}")

    if args.expression is not None:
        try:
            print(evaluate_line(args.expression, verbose, associativity))
        except CalculatorError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1
        return 0

    run_repl(verbose=verbose, associativity=associativity)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Command Line Interface Calculator")

    parser.add_argument(
        "mode",
        nargs="?",
        default=None,
        help="Pass 'verbose' to also print the tokens and the postfix notation"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Same as the 'verbose' mode argument"
    )
    parser.add_argument(
        "-e", "--expression",
        type=str,
        default=None,
        help="Evaluate a single expression and exit"
    )
    parser.add_argument(
        "--associativity",
        choices=ASSOCIATIVITY_CHOICES,
        default=None,
        help="Grouping of chained binary operators of equal precedence "
             f"(default: {CALCULATOR_CONFIG['associativity']})"
    )
    parser.add_argument(
        "--log_level",
        type=str.upper,
        choices=LOG_LEVEL_CHOICES,
        default=LOGGING_CONFIG["level"],
        help="Logging level (default: %(default)s)"
    )
    return parser


def cli(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format=LOGGING_CONFIG["format"]
    )
    return main(args)


if __name__ == "__main__":
    sys.exit(cli())
