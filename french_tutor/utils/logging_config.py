"""로깅 설정 모듈.

CLI 진입점에서 루트 로거를 구성할 때 사용합니다. 라이브러리 모듈은
``logging.getLogger(__name__)`` 로거만 쓰고 핸들러를 직접 붙이지 않습니다.
"""

import os
import logging
from datetime import datetime
from typing import List, Optional, Tuple

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

logger = logging.getLogger(__name__)


def get_log_file(output_dir: str = ".") -> str:
    """날짜별 디버그 로그 파일 경로 (<output_dir>/logs/french_tutor_YYYYMMDD.log)."""
    timestamp = datetime.now().strftime("%Y%m%d")
    return os.path.join(output_dir, "logs", f"french_tutor_{timestamp}.log")


def _build_handlers(level: str, output_dir: str, console_output: bool) -> Tuple[List[logging.Handler], Optional[str]]:
    formatter = logging.Formatter(LOG_FORMAT)
    handlers: List[logging.Handler] = []

    if console_output:
        handlers.append(logging.StreamHandler())

    # 파일 로그는 DEBUG에서만
    log_file_path = None
    if level == 'DEBUG':
        log_file_path = get_log_file(output_dir)
        os.makedirs(os.path.dirname(log_file_path), exist_ok=True)
        handlers.append(logging.FileHandler(log_file_path, mode='a', encoding='utf-8'))

    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers, log_file_path


def configure_logging(
    log_level: str = "INFO",
    output_dir: str = ".",
    console_output: bool = True
) -> Optional[str]:
    """
    루트 로거를 다시 구성합니다. 호출할 때마다 기존 루트 핸들러를 교체합니다.

    Args:
        log_level: 로그 레벨 이름 (대소문자 무관)
        output_dir: DEBUG 로그 파일을 둘 디렉토리
        console_output: 표준 에러 출력 핸들러 사용 여부

    Returns:
        디버그 로그 파일 경로 (파일 로깅을 하지 않으면 None)

    Raises:
        ValueError: 알 수 없는 로그 레벨인 경우
    """
    level = str(log_level).upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"지원하지 않는 로그 레벨: {log_level}")

    handlers, log_file_path = _build_handlers(level, output_dir, console_output)

    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_logger.setLevel(level)
    for handler in handlers:
        root_logger.addHandler(handler)

    logger.debug(f"로깅 설정 완료: 레벨={level}, 파일={log_file_path or '없음'}")
    return log_file_path
