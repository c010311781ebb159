"""
練習流程範例

不經過終端機介面，直接以指令驅動 SessionController，
展示一般模式、進階 (數字聲調) 模式與提示的效果。
"""

from pinyindrill import (
    DrillConfig,
    RequestHint,
    SelectChapter,
    SessionController,
    SetAdvancedMode,
    Submit,
    enable_debug_logging,
)
from pinyindrill.core.scheduler import ManualScheduler


def show(view):
    print(f"  [{view.screen.value}] item={view.item} {view.streak_text} "
          f"feedback={view.feedback.kind.value}:{view.feedback.text!r}")


def demo_plain_mode():
    """一般模式：只比對無聲調拼音"""
    print("=" * 60)
    print("範例 1: 一般模式")
    print("=" * 60)

    scheduler = ManualScheduler()
    controller = SessionController(
        DrillConfig(mastery_threshold=2),
        catalog=tuple("爱好的"),
        scheduler=scheduler,
    )
    view = controller.dispatch(SelectChapter(0))
    show(view)

    # 故意先答錯，再使用提示
    show(controller.dispatch(Submit("xx")))
    show(controller.dispatch(RequestHint()))
    print()


def demo_advanced_mode():
    """進階模式：需要數字聲調，輕聲不加數字"""
    print("=" * 60)
    print("範例 2: 進階模式")
    print("=" * 60)

    scheduler = ManualScheduler()
    controller = SessionController(catalog=tuple("爱"), scheduler=scheduler)
    controller.dispatch(SetAdvancedMode(True))
    show(controller.dispatch(SelectChapter(0)))
    show(controller.dispatch(Submit("ai")))
    show(controller.dispatch(Submit("ai4")))

    # 答對後的停頓由 scheduler 控制
    scheduler.run_all()
    show(controller.view())
    print()


if __name__ == "__main__":
    enable_debug_logging()
    demo_plain_mode()
    demo_advanced_mode()
