import argparse
import logging
import os
import sys

# Ensure the project root is in python path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from src.config.settings import settings
from src.decision.services.decision_pipeline import DecisionPipeline
from src.decision.services.report_formatter import format_analysis
from src.decision.services.analysis_serializer import analysis_to_json
from src.infrastructure.inbound.http.problem_text_validator import ProblemTextValidator
from src.decision.domain.exceptions import ProblemTextRejected


def main():
    parser = argparse.ArgumentParser(description="Decision structure analysis (dev runner)")
    parser.add_argument("problem_text", nargs="*", help="Problem statement; omit to start the tool server")
    parser.add_argument("--json", action="store_true", help="Print raw structured data instead of the report")
    parser.add_argument("--host", default=settings.HTTP_HOST)
    parser.add_argument("--port", type=int, default=settings.HTTP_PORT)
    args = parser.parse_args()

    logging.basicConfig(level=settings.LOG_LEVEL)

    if not args.problem_text:
        from src.infrastructure.inbound.http.decision_tool_server import run_server
        print(f"Starting {settings.SERVICE_NAME} tool server on {args.host}:{args.port}...")
        run_server(host=args.host, port=args.port)
        return

    try:
        text = ProblemTextValidator().validate(" ".join(args.problem_text))
    except ProblemTextRejected as exc:
        print(f"Rejected: {exc}", file=sys.stderr)
        sys.exit(2)

    analysis = DecisionPipeline().analyze(text)
    print(analysis_to_json(analysis) if args.json else format_analysis(analysis))


if __name__ == "__main__":
    main()
