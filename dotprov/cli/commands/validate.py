"""
Validate 命令实现

验证配置文件的命令。
"""

import json
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from ...config import validate_config
from ...errors import ExitCode


console = Console()


def validate_command(
    config: str = typer.Option(..., "--config", "-c", help="配置文件路径"),
    json_output: bool = typer.Option(False, "--json", help="输出 JSON 格式的错误信息"),
) -> None:
    """验证配置文件

    示例:
        dotprov validate -c dotprov.yaml
        dotprov validate -c dotprov.yaml --json
    """
    config_path = Path(config)
    console.print(f"正在验证配置文件: [cyan]{config_path}[/cyan]")

    errors = validate_config(config_path)

    if not errors:
        console.print("[green]✓ 配置文件验证通过[/green]")
        return

    if json_output:
        error_data = {
            "file": str(config_path),
            "errors": errors,
            "error_count": len(errors),
        }
        console.print_json(json.dumps(error_data, ensure_ascii=False, default=str))
    else:
        table = Table(title=f"验证失败 ({len(errors)} 个错误)")
        table.add_column("字段", style="cyan")
        table.add_column("错误", style="red")
        for err in errors:
            loc = " -> ".join(str(item) for item in err.get('loc', [])) or "(根级别)"
            table.add_row(loc, str(err.get('msg', '未知错误')))
        console.print(table)

    raise typer.Exit(ExitCode.CONFIG_ERROR)
