"""
CLI 엔트리포인트
"""

import argparse
import sys
from pathlib import Path

from . import config as app_config
from .errors import ConversionError
from .job import ConversionJob
from .logging_config import setup_logging
from .progress import Done, Failed, Progress, Started
from .utils import conversion_label


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog='docconv',
        description='Markdown ↔ Word, Excel → Markdown 변환기'
    )
    parser.add_argument('input', help='입력 파일 (.md, .docx, .xlsx)')
    parser.add_argument('-o', '--output-dir',
                        help='출력 폴더 (기본: 저장된 폴더 또는 ~/Downloads)')
    parser.add_argument('-q', '--quiet', action='store_true',
                        help='진행률 표시하지 않음')
    parser.add_argument('--save-output-dir', action='store_true',
                        help='지정한 출력 폴더를 기본값으로 저장')
    parser.add_argument('--log-level', help='로그 레벨 (기본: INFO)')

    args = parser.parse_args(argv)
    if args.save_output_dir and not args.output_dir:
        parser.error('--save-output-dir requires -o/--output-dir')

    setup_logging(args.log_level or ('WARNING' if args.quiet else None))

    input_path = Path(args.input)

    if not input_path.exists():
        print(f'Error: {input_path} not found', file=sys.stderr)
        sys.exit(1)

    output_dir = Path(args.output_dir) if args.output_dir else app_config.get_output_dir()
    if args.save_output_dir:
        app_config.save_output_dir(args.output_dir)

    print(f'Conversion: {conversion_label(input_path)}', file=sys.stderr)

    job = ConversionJob(input_path, output_dir).start()
    try:
        for event in job.events():
            if isinstance(event, Started):
                if not args.quiet:
                    print('Status: Converting...', file=sys.stderr)
            elif isinstance(event, Progress):
                if not args.quiet:
                    print(f'\r{event.percent:3d}%', end='', file=sys.stderr, flush=True)
            elif isinstance(event, Failed):
                _fail(event.error, args.quiet)
            elif isinstance(event, Done):
                if not args.quiet:
                    print(file=sys.stderr)
                print(event.output_path)
    except KeyboardInterrupt:
        # 취소는 지원하지 않음 - 작업 스레드는 프로세스 종료와 함께 버려짐
        print('\nInterrupted', file=sys.stderr)
        sys.exit(130)


def _fail(error: ConversionError, quiet: bool) -> None:
    """오류 출력 후 종료"""
    if not quiet:
        print(file=sys.stderr)
    print(f'Error: {error.message}', file=sys.stderr)
    sys.exit(1)


if __name__ == '__main__':
    main()
