"""
交互确认

confirm 读取一行输入，仅 y / yes（不区分大小写）视为同意，
其余输入（包括空行和 EOF）均视为拒绝。
"""

from typing import Callable, Optional

from rich.console import Console

ConfirmFn = Callable[[str], bool]

_YES = {"y", "yes"}


def is_affirmative(answer: Optional[str]) -> bool:
    return (answer or "").strip().lower() in _YES


def console_confirm(prompt: str, console: Optional[Console] = None) -> bool:
    """在终端上询问并返回是否同意"""
    console = console or Console()
    try:
        answer = console.input(f"{prompt} [y/N]: ", markup=False)
    except EOFError:
        return False
    return is_affirmative(answer)
