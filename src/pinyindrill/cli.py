"""
終端機介面

以純文字繪製 ViewModel，從 stdin 讀取指令。

使用方式:
    pinyin-drill
    pinyin-drill --advanced --threshold 3 --data-dir ./progress
    python -m pinyindrill --verbose
"""

import argparse
import sys
import time
from pathlib import Path
from typing import Callable, List, Optional

from pinyindrill.config import CHARS_PER_EXERCISE, MASTERY_THRESHOLD, DrillConfig
from pinyindrill.core.scheduler import ManualScheduler
from pinyindrill.progress.storage import FileStorage
from pinyindrill.session.commands import (
    Back,
    Cancel,
    Command,
    Confirm,
    ResetAll,
    ResetChapter,
    SelectChapter,
    SetAdvancedMode,
    Submit,
)
from pinyindrill.session.controller import SessionController
from pinyindrill.session.view import FeedbackKind, Screen, ViewModel
from pinyindrill.utils.lazy_imports import check_pypinyin_dependencies
from pinyindrill.utils.logger import enable_timing_logging

DEFAULT_DATA_DIR = Path.home() / ".pinyindrill"

InputFunc = Callable[[str], str]
OutputFunc = Callable[[str], None]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pinyin-drill",
        description="Practice Chinese characters by typing their pinyin.",
    )
    parser.add_argument("--data-dir", type=Path, default=DEFAULT_DATA_DIR,
                        help="directory where progress is stored (default: %(default)s)")
    parser.add_argument("--threshold", type=int, default=MASTERY_THRESHOLD,
                        help="correct answers in a row needed to master a character")
    parser.add_argument("--chapter-size", type=int, default=CHARS_PER_EXERCISE,
                        help="characters per chapter")
    parser.add_argument("--delay", type=float, default=None,
                        help="pause in seconds after a correct answer")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--advanced", dest="advanced", action="store_true", default=None,
                      help="require tone numbers (e.g. ma3)")
    mode.add_argument("--basic", dest="advanced", action="store_false",
                      help="accept pinyin without tones")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--timing", action="store_true", help="log how long startup and lookups take")
    return parser


def render(view: ViewModel) -> List[str]:
    """把 ViewModel 轉成要輸出的文字行"""
    lines: List[str] = []
    mode_label = "advanced (tone numbers)" if view.advanced_mode else "basic"

    if view.screen is Screen.MENU:
        lines.append(f"== Chapters == mode: {mode_label}")
        for summary in view.chapters:
            mark = " ✓" if summary.completed else ""
            lines.append(f"  [{summary.index + 1}] {summary.range_label}: {summary.progress_label}{mark}")
        lines.append("Enter a chapter number, 'a' to toggle mode, 'r' to reset all, 'q' to quit.")
    elif view.screen is Screen.COMPLETE:
        lines.append(f"Chapter complete! {view.progress_text}")
        lines.append("Press Enter to go back, 'r' to reset this chapter.")
    else:
        lines.append(f"[{view.progress_text}] {view.streak_text}")
        lines.append(f"    {view.item}")
        if view.feedback.kind is not FeedbackKind.NONE:
            lines.append(f"  {view.feedback.kind.value}: {view.feedback.text}")
        if not view.awaiting_advance:
            lines.append(f"  {view.placeholder}  ('hint' for a hint, ':b' to go back)")

    if view.confirm_prompt:
        lines.append(f"{view.confirm_prompt} [y/N]")
    return lines


def parse_input(view: ViewModel, text: str) -> Optional[Command]:
    """
    把一行輸入轉成指令

    Returns:
        Command；無對應指令時回傳 None
    """
    stripped = text.strip()
    lowered = stripped.lower()

    if view.confirm_prompt:
        return Confirm() if lowered in ("y", "yes") else Cancel()

    if view.screen is Screen.MENU:
        if lowered == "r":
            return ResetAll()
        if lowered == "a":
            return SetAdvancedMode(not view.advanced_mode)
        if stripped.isdigit():
            return SelectChapter(int(stripped) - 1)
        return None

    if view.screen is Screen.COMPLETE:
        if lowered == "r":
            return ResetChapter()
        return Back()

    if lowered in (":b", ":back"):
        return Back()
    if not stripped:
        return None
    return Submit(stripped)


def run(
    controller: SessionController,
    scheduler: ManualScheduler,
    input_func: Optional[InputFunc] = None,
    output: Optional[OutputFunc] = None,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """互動迴圈，輸入 'q' 或 EOF 結束"""
    input_func = input_func or input
    output = output or print
    view = controller.view()
    chapter_total = len(view.chapters)
    while True:
        for line in render(view):
            output(line)
        try:
            text = input_func("> ")
        except (EOFError, KeyboardInterrupt):
            output("")
            return 0

        if view.screen is Screen.MENU and not view.confirm_prompt and text.strip().lower() == "q":
            return 0

        command = parse_input(view, text)
        if command is None:
            continue
        if isinstance(command, SelectChapter) and not 0 <= command.index < chapter_total:
            output(f"Choose a chapter between 1 and {chapter_total}.")
            continue

        view = controller.dispatch(command)
        if view.awaiting_advance:
            for line in render(view):
                output(line)
            sleep(controller.config.advance_delay)
            scheduler.run_all()
            view = controller.view()


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config_kwargs = dict(
        mastery_threshold=args.threshold,
        chars_per_exercise=args.chapter_size,
        verbose=args.verbose,
    )
    if args.delay is not None:
        config_kwargs["advance_delay"] = args.delay
    try:
        config = DrillConfig(**config_kwargs)
    except ValueError as e:
        build_parser().error(str(e))
    if args.timing:
        enable_timing_logging()
    try:
        check_pypinyin_dependencies()
    except ImportError as e:
        print(e, file=sys.stderr)
        return 1

    scheduler = ManualScheduler()
    controller = SessionController(
        config,
        storage=FileStorage(args.data_dir),
        scheduler=scheduler,
    )
    if args.advanced is not None:
        controller.dispatch(SetAdvancedMode(args.advanced))
    return run(controller, scheduler)
