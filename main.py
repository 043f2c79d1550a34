import argparse
import sys

from plagiarism_checker.config import APP_CONFIG
from plagiarism_checker.core.comparator import PlagiarismChecker
from plagiarism_checker.core.logging_config import setup_logging
from plagiarism_checker.core.models import Algorithm
from plagiarism_checker.core.validation import ValidationError
from plagiarism_checker.utils.report import format_report
from plagiarism_checker.utils.text_loader import load_text_file


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Compare two text documents for shared segments.")
    parser.add_argument("document_a", help="Path to the first .txt document")
    parser.add_argument("document_b", help="Path to the second .txt document")
    parser.add_argument(
        "-a", "--algorithm",
        choices=[algorithm.value for algorithm in Algorithm],
        default=Algorithm.HASHING.value,
        help="Matching strategy (default: rabin-karp)",
    )
    parser.add_argument(
        "-m", "--min-length",
        type=int,
        default=APP_CONFIG['min_match_length'],
        help="Minimum length of a reported segment",
    )
    parser.add_argument(
        "-w", "--workers",
        type=int,
        default=APP_CONFIG['max_workers'],
        help="Threads used to search window sizes",
    )
    parser.add_argument("--progress", action="store_true", help="Show progress over window sizes")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    setup_logging(
        log_level=APP_CONFIG['log_level'],
        log_dir=APP_CONFIG['log_dir'],
        structured_logging=APP_CONFIG['structured_logging'],
        enable_console=False,
        enable_file=True
    )

    try:
        # Step 1: Load both documents
        text_a = load_text_file(args.document_a, max_size_mb=APP_CONFIG['max_upload_mb'])
        text_b = load_text_file(args.document_b, max_size_mb=APP_CONFIG['max_upload_mb'])

        # Step 2: Compare
        checker = PlagiarismChecker(
            min_match_length=args.min_length,
            algorithm=args.algorithm,
            max_workers=args.workers,
            show_progress=args.progress,
        )
        result = checker.compare(text_a, text_b)
    except ValidationError as e:
        print(f"Invalid input: {e.message}", file=sys.stderr)
        return 2

    # Step 3: Display results
    print(format_report(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
