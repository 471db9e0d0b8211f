"""主程序入口 - 交互式四则运算计算器（支持BODMAS优先级）"""
import argparse
import logging
import sys

from config.config import CLI_CONFIG, CALCULATOR_CONFIG, validate_config
from core import evaluate_expression, CalculatorError
from utils import format_result

logger = logging.getLogger(__name__)


def setup_logging(level):
    # 日志只写 stderr，stdout 留给计算结果
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )


def is_quit_command(line):
    return line.strip().lower() == CLI_CONFIG["quit_command"]


def evaluate_line(line, strict=None):
    """
    求值一行输入并返回要打印的文本
    Returns:
        (ok, text)，text 形如 'Result: 4' 或 'Error: Division by zero'
    """
    expression = line.strip()
    try:
        value = evaluate_expression(expression, strict=strict)
    except CalculatorError as e:
        logger.debug(f"Rejected {expression!r}: {type(e).__name__} ({e.detail})")
        return False, f"{CLI_CONFIG['error_prefix']}{e}"
    return True, f"{CLI_CONFIG['result_prefix']}{format_result(value)}"


def run_repl(strict=None, read_line=None, write=print):
    """读取-求值-打印循环；输入 quit（忽略大小写）或 EOF 时结束"""
    if read_line is None:
        read_line = input
    write(CLI_CONFIG["banner"])

    while True:
        write(CLI_CONFIG["prompt"])
        try:
            line = read_line()
        except (EOFError, KeyboardInterrupt):
            logger.debug("Input closed, leaving loop")
            write(CLI_CONFIG["farewell"])
            break

        if is_quit_command(line):
            write(CLI_CONFIG["farewell"])
            break

        _, text = evaluate_line(line, strict=strict)
        write(text)


def main(args):
    setup_logging(args.log_level)
    validate_config()

    # 未指定时沿用 CALCULATOR_CONFIG["strict_parentheses"]
    strict = None
    if args.lenient_parentheses:
        strict = False
        logger.info("Using lenient parenthesis matching")

    if args.expression is not None:
        ok, text = evaluate_line(args.expression, strict=strict)
        print(text)
        return 0 if ok else 1

    run_repl(strict=strict)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Interactive BODMAS calculator")

    parser.add_argument(
        "--expression",
        type=str,
        default=None,
        help="Evaluate a single expression and exit instead of starting the interactive loop"
    )
    parser.add_argument(
        "--lenient_parentheses",
        action="store_true",
        help="Tolerate unmatched parentheses instead of reporting an invalid expression"
    )
    parser.add_argument(
        "--log_level",
        type=str.upper,
        default=CALCULATOR_CONFIG["default_log_level"],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level for diagnostics written to stderr (default: WARNING)"
    )
    return parser


def cli(argv=None):
    args = build_parser().parse_args(argv)
    return main(args)


if __name__ == "__main__":
    sys.exit(cli())
