"""
설정 관리 모듈
- 기본 출력 폴더 등 사용자 설정을 로컬에 저장/로드
"""
import os
import json
from pathlib import Path


def get_config_dir() -> Path:
    """설정 파일 디렉토리 반환 (Windows: %APPDATA%\\DocConverter)"""
    if os.name == 'nt':  # Windows
        base = os.environ.get('APPDATA', os.path.expanduser('~'))
    else:  # macOS/Linux
        base = os.path.expanduser('~/.config')

    config_dir = Path(base) / 'DocConverter'
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_path() -> Path:
    """설정 파일 경로 반환"""
    return get_config_dir() / 'config.json'


def get_log_path() -> Path:
    """변환 로그 파일 경로 반환"""
    return get_config_dir() / 'convert.log'


def load_config() -> dict:
    """설정 파일 로드 (없거나 손상된 경우 빈 설정)"""
    config_path = get_config_path()
    if config_path.exists():
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                return json.load(f)
        except (OSError, ValueError):
            return {}
    return {}


def save_config(config: dict):
    """설정 파일 저장"""
    config_path = get_config_path()
    with open(config_path, 'w', encoding='utf-8') as f:
        json.dump(config, f, indent=2, ensure_ascii=False)


def get_output_dir() -> Path:
    """저장된 출력 폴더 반환 (미설정 시 ~/Downloads)"""
    saved = load_config().get('output_dir', '')
    if saved:
        return Path(saved)
    return Path.home() / 'Downloads'


def save_output_dir(output_dir: str):
    """기본 출력 폴더 저장"""
    config = load_config()
    config['output_dir'] = str(Path(output_dir).resolve())
    save_config(config)
