"""
로컬 변환 서버

python -m docconv.server 로 실행
"""

import io
import shutil
import tempfile
from pathlib import Path

from flask import Flask, request, jsonify, send_file

from .errors import ConversionError, ReadError, UnsupportedFormatError, WriteError
from .logging_config import setup_logging
from .pipeline import convert as convert_file

app = Flask(__name__)

# 임시 디렉토리
TEMP_DIR = Path(tempfile.gettempdir()) / "docconv"

# 오류 종류 → HTTP 상태 코드
ERROR_STATUS = {
    UnsupportedFormatError: 400,
    ReadError: 422,
    WriteError: 500,
}


# CORS 헤더 추가 (로컬 개발 및 다른 포트 접근 허용)
@app.after_request
def add_cors_headers(response):
    response.headers['Access-Control-Allow-Origin'] = '*'
    response.headers['Access-Control-Allow-Methods'] = 'GET, POST, OPTIONS'
    response.headers['Access-Control-Allow-Headers'] = 'Content-Type'
    return response


# 404 핸들러
@app.errorhandler(404)
def not_found(e):
    return jsonify({'success': False, 'error': 'Not found'}), 404


@app.errorhandler(ConversionError)
def conversion_failed(e):
    status = ERROR_STATUS.get(type(e), 500)
    app.logger.warning('변환 실패 (%d): %s', status, e.message)
    return jsonify({'success': False, 'error': e.message}), status


@app.route('/health')
def health():
    return jsonify({'status': 'ok'})


@app.route('/convert', methods=['POST'])
def convert():
    """파일 변환 API (변환된 파일을 첨부로 반환)"""
    file = request.files.get('file')
    if not file or not file.filename:
        return jsonify({'success': False, 'error': 'No file provided'}), 400

    # 디렉토리 부분 제거 (원래 파일 이름과 확장자는 유지)
    filename = Path(file.filename.replace('\\', '/')).name
    if filename in ('.', '..'):
        return jsonify({'success': False, 'error': 'Invalid file name'}), 400

    # 요청마다 별도 작업 폴더 (경쟁 조건 방지)
    TEMP_DIR.mkdir(parents=True, exist_ok=True)
    work_dir = Path(tempfile.mkdtemp(dir=TEMP_DIR))
    try:
        input_path = work_dir / filename
        file.save(str(input_path))

        output_path = convert_file(input_path, work_dir)
        data = io.BytesIO(output_path.read_bytes())
    finally:
        shutil.rmtree(work_dir, ignore_errors=True)

    return send_file(data, as_attachment=True, download_name=output_path.name)


def main(port: int = 5000):
    """서버 시작"""
    setup_logging()
    print(f"\n{'='*50}")
    print(f"  docconv 로컬 변환기")
    print(f"  http://localhost:{port}")
    print(f"{'='*50}\n")

    app.run(host='127.0.0.1', port=port, debug=False)


if __name__ == '__main__':
    import argparse
    parser = argparse.ArgumentParser(description='docconv 로컬 변환 서버')
    parser.add_argument('-p', '--port', type=int, default=5000, help='포트 번호')
    args = parser.parse_args()

    main(port=args.port)
