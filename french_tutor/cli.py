#!/usr/bin/env python3
"""프랑스어 발음 연습 CLI 인터페이스.

목표 구문과 음성 인식 결과를 비교해 점수, 등급, 발음 팁을 출력합니다.
발화를 인수로 주지 않으면 표준 입력에서 한 줄씩 시도를 읽어
세션 요약까지 출력합니다.
"""

import sys
import json
import argparse
import logging
from typing import List, Optional, TextIO
from pathlib import Path

# 환경변수 로딩 (.env.local 파일 지원)
from dotenv import load_dotenv

from .analyzers.pronunciation import PronunciationAnalyzer, FeedbackRecord
from .core.scoring_config import ScoringConfig
from .core.practice_session import PracticeSession
from .utils.logging_config import configure_logging

logger = logging.getLogger(__name__)

TIER_ICONS = {
    'excellent': '🎉',
    'good': '👍',
    'fair': '🙂',
    'poor': '🔁',
}


def load_environment_variables() -> List[str]:
    """환경변수 파일들을 우선순위에 따라 로드 (.env.local > .env, 기존 값 보존)."""
    current_dir = Path.cwd()

    env_files = [
        current_dir / ".env.local",
        current_dir / ".env"
    ]

    loaded_files = []
    for env_file in env_files:
        if env_file.exists():
            load_dotenv(env_file, override=False)
            loaded_files.append(str(env_file))

    return loaded_files


def setup_logging(log_level: str = "INFO", output_dir: str = ".") -> Optional[str]:
    """로깅 설정. DEBUG 레벨이면 로그 파일 경로를 반환합니다."""
    return configure_logging(log_level=log_level, output_dir=output_dir)


def non_negative_int(value: str) -> int:
    """0 이상의 정수 인수 검증."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"정수가 아닙니다: {value}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"0 이상이어야 합니다: {value}")
    return number


def create_argument_parser() -> argparse.ArgumentParser:
    """명령행 인수 파서 생성."""
    parser = argparse.ArgumentParser(
        prog='french-tutor',
        description='🇫🇷 프랑스어 발음 연습 채점기',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
사용 예시:
  %(prog)s "bonjour monsieur" "bonjour monsieur"   # 한 번 채점
  %(prog)s "je suis bien" "je suis hello" --json   # JSON 출력
  %(prog)s "merci beaucoup"                        # 표준 입력에서 여러 번 시도
        """
    )

    parser.add_argument('target', help='목표 프랑스어 구문')
    parser.add_argument('spoken', nargs='?', default=None,
                        help='음성 인식 결과 (생략하면 표준 입력에서 읽음)')

    parser.add_argument('--json', action='store_true', help='결과를 JSON으로 출력')
    parser.add_argument('--max-tips', type=non_negative_int, metavar='N',
                        help='표시할 최대 발음 팁 수 (기본값: 2)')
    parser.add_argument('--output-dir', default='.', metavar='DIR',
                        help='DEBUG 로그 파일 저장 디렉토리 (기본값: 현재 디렉토리)')
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        default=None,
                        help='로그 레벨 (기본값: FRENCH_TUTOR_LOG_LEVEL 또는 INFO)')
    parser.add_argument('--quiet', action='store_true', help='최소한의 출력만 표시')
    parser.add_argument('--verbose', action='store_true', help='상세 로그 표시')

    return parser


def format_feedback(feedback: FeedbackRecord) -> str:
    """피드백을 사람이 읽기 쉬운 텍스트로 변환."""
    icon = TIER_ICONS.get(feedback.tier.value, '')
    lines = [
        f"{icon} {feedback.message}",
        f"  점수: {feedback.score}% ({feedback.tier.value})",
        f"  목표: {feedback.target_text}",
        f"  발화: {feedback.spoken_text}",
    ]
    for tip in feedback.tips:
        lines.append(f"  💡 {tip.description}")
        lines.append(f"     예시: {', '.join(tip.examples)}")
        if tip.mouth_position:
            lines.append(f"     입 모양: {tip.mouth_position}")
    return "\n".join(lines)


def print_feedback(feedback: FeedbackRecord, as_json: bool) -> None:
    if as_json:
        print(json.dumps(feedback.to_dict(), ensure_ascii=False))
    else:
        print(format_feedback(feedback))


def print_session_summary(session: PracticeSession, as_json: bool) -> None:
    """세션 요약 출력."""
    summary = session.summary()
    if as_json:
        print(json.dumps({'summary': summary}, ensure_ascii=False))
        return

    print("\n📋 연습 세션 요약:")
    print(f"  시도: {summary['attempts']}회")
    print(f"  good 이상: {summary['good']}회, excellent: {summary['excellent']}회")
    print(f"  평균 점수: {summary['average_score']}%")
    print(f"  최고/최저: {summary['best_score']}% / {summary['worst_score']}%")


def run_interactive(analyzer: PronunciationAnalyzer, target: str, as_json: bool,
                    quiet: bool, stream: TextIO) -> PracticeSession:
    """표준 입력에서 빈 줄 또는 EOF까지 시도를 읽어 채점합니다."""
    session = PracticeSession(config=analyzer.config)

    if not quiet and not as_json:
        print(f"🎯 목표 구문: {target}")
        print("발화 결과를 한 줄씩 입력하세요 (빈 줄로 종료).")

    for line in stream:
        spoken = line.rstrip("\n")
        if not spoken.strip():
            break
        feedback = analyzer.build_feedback(spoken, target)
        session.record(feedback)
        print_feedback(feedback, as_json)

    print_session_summary(session, as_json)
    return session


def main(argv: Optional[List[str]] = None) -> int:
    """메인 함수."""
    try:
        parser = create_argument_parser()
        args = parser.parse_args(argv)

        load_environment_variables()

        config = ScoringConfig()
        if args.max_tips is not None:
            config.update(max_tips=args.max_tips)

        if args.quiet:
            log_level = "ERROR"
        elif args.verbose:
            log_level = "DEBUG"
        else:
            log_level = args.log_level or config.log_level
        log_file = setup_logging(log_level, args.output_dir)
        if log_file and not args.json:
            print(f"📝 디버그 로그: {log_file}")

        analyzer = PronunciationAnalyzer(config=config)

        if args.spoken is not None:
            print_feedback(analyzer.build_feedback(args.spoken, args.target), args.json)
        else:
            run_interactive(analyzer, args.target, args.json, args.quiet, sys.stdin)

        return 0

    except KeyboardInterrupt:
        print("\n\n⚠️  사용자에 의해 연습이 중단되었습니다.")
        return 1
    except Exception as e:
        print(f"\n❌ 채점 중 오류가 발생했습니다: {str(e)}")
        logger.exception("채점 실행 중 예외 발생")
        return 1


if __name__ == "__main__":
    sys.exit(main())
