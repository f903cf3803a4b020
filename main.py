"""主程序入口 - 命令行求值四则运算表达式"""
import argparse
import logging
import sys

from config.config import *
from calculator import CalculatorModel, ExpressionBuffer, load_expressions, evaluate_many, summarize

# 设置日志
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def main(args):
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    strict = True if args.strict else None
    model = CalculatorModel(strict_characters=strict, strict_parentheses=strict)

    expressions = list(args.expressions or [])
    if args.file:
        expressions.extend(load_expressions(args.file, args.column))

    if not expressions:
        logger.warning("No expressions given")
        return 1

    # 键盘别名：* -> ×，/ -> ÷
    if args.ascii:
        buffer = ExpressionBuffer()
        expressions = [buffer.normalize(expression) for expression in expressions]

    results = evaluate_many(expressions, model)
    for row in results.itertuples(index=False):
        print(f"{row.expression} = {row.display}")

    summary = summarize(results)
    if args.file:
        logger.info(f"Evaluated {summary['total']} expressions: "
                    f"{summary['ok']} ok, {summary['failed']} failed")
        for kind, count in summary['errors'].items():
            logger.info(f"  {kind}: {count}")

    if args.save_results:
        output_path = args.output_path
        logger.info(f"Saving results to {output_path}")
        results.to_csv(output_path, index=False)

    return 1 if summary['failed'] else 0


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Quick Calc expression evaluator")

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate, e.g. '(2+3)×4'"
    )
    parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="Path to a CSV file or a text file with one expression per line"
    )
    parser.add_argument(
        "--column",
        type=str,
        default=BATCH_CONFIG["expression_column"],
        help="Name of the expression column in a CSV file"
    )
    parser.add_argument(
        "--ascii",
        action="store_true",
        help="Accept * and / as aliases for × and ÷"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject unknown characters and unmatched '(' instead of ignoring them"
    )
    parser.add_argument(
        "--save_results",
        action="store_true",
        help="Save the results to a CSV file"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=BATCH_CONFIG["default_output_path"],
        help="Path to save the results"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


if __name__ == "__main__":
    sys.exit(main(parse_args()))
