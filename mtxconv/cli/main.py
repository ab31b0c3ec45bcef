"""CLI 入口模組"""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.tree import Tree

from mtxconv.core import ConversionOutcome, ConversionRequest, load_matrix, validate_matrix
from mtxconv.core.converter import preview_conversion, run_conversion
from mtxconv.core.exporter import format_value
from mtxconv.core.logging_config import setup_logging, get_logger
from mtxconv.core.paths import get_log_dir

app = typer.Typer(
    name="mtxconv",
    help="矩陣文字檔轉換工具 - 轉置矩陣，並輸出為單一檔案或每列一個檔案",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)


console = Console(
    legacy_windows=False,
)
logger = get_logger(__name__)

# inspect 指令預覽的最大列數
PREVIEW_ROWS = 5


@app.command()
def convert(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="輸入檔案：以空白分隔數值、每行一列的文字檔",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
            show_default=False,
        ),
    ],
    output: Annotated[
        str,
        typer.Argument(
            help="輸出檔案；搭配 --split 時為檔名樣式，如 out_#.txt",
            show_default=False,
        ),
    ],
    transpose: Annotated[
        bool,
        typer.Option(
            "--transpose", "-t",
            help="輸出前先轉置矩陣",
        ),
    ] = False,
    split: Annotated[
        bool,
        typer.Option(
            "--split", "-s",
            help="每列輸出一個檔案，以列號取代樣式中的替換字元",
        ),
    ] = False,
    token: Annotated[
        str,
        typer.Option(
            "--token", "-r",
            help="檔名樣式中要以列號取代的字元",
            metavar="TOKEN",
        ),
    ] = "#",
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run", "-n",
            help="預覽模式，只顯示將要寫入的檔案",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose", "-v",
            help="顯示詳細日誌",
        ),
    ] = False,
) -> None:
    """
    轉換矩陣文字檔

    讀取矩陣、檢查每列長度一致，可選擇轉置後輸出。

    範例：
    - 單一檔案： mtxconv convert data.txt out.txt
    - 轉置後輸出： mtxconv convert data.txt out.txt -t
    - 每列一個檔案： mtxconv convert data.txt "row_#.txt" --split
    - 自訂替換字元： mtxconv convert data.txt "row_XX.txt" -s -r XX
    """
    setup_logging(verbose=verbose, log_dir=get_log_dir(), console=console)
    logger.info(f"開始轉檔：{input_file} -> {output}")

    request = ConversionRequest(
        input_path=input_file,
        transpose=transpose,
        split_per_row=split,
        output=output,
        replace_token=token,
    )

    if dry_run:
        outcome = preview_conversion(request)
        _exit_on_failure(outcome)
        console.print(_build_outputs_tree(outcome, "將要寫入的檔案"))
        return

    with console.status("[bold green]轉檔中..."):
        outcome = run_conversion(request)

    _exit_on_failure(outcome)
    console.print(f"[bold green]{outcome.message}[/bold green]")
    console.print(f"[blue]矩陣大小：[/blue]{outcome.rows} 列 x {outcome.columns} 欄")
    console.print(f"[blue]輸出檔案：[/blue]{len(outcome.written)} 個")


def _exit_on_failure(outcome: ConversionOutcome) -> None:
    """轉檔失敗時顯示錯誤並結束"""
    if outcome.success:
        return

    console.print(f"[red]錯誤：{escape(outcome.message)}[/red]")
    logger.error(f"轉檔失敗：{outcome.error!r}")
    if outcome.written:
        console.print(f"[yellow]已寫入的 {len(outcome.written)} 個檔案未被刪除[/yellow]")
    raise typer.Exit(1)


def _build_outputs_tree(outcome: ConversionOutcome, title: str) -> Tree:
    """建立輸出檔案樹狀結構"""
    tree = Tree(f"[bold blue]{title}[/bold blue] ({outcome.rows} 列 x {outcome.columns} 欄)")

    nodes: dict[Path, Tree] = {}
    for path in outcome.written:
        parent = path.parent
        if parent not in nodes:
            nodes[parent] = tree.add(f"📁 [bold]{escape(str(parent))}[/bold]")
        nodes[parent].add(f"[cyan]{escape(path.name)}[/cyan]")

    return tree


@app.command()
def inspect(
    input_file: Annotated[
        Path,
        typer.Argument(
            help="輸入檔案路徑",
            exists=True,
            file_okay=True,
            dir_okay=False,
            resolve_path=True,
        ),
    ],
) -> None:
    """
    檢查矩陣文字檔

    僅讀取並驗證檔案，顯示矩陣大小與前幾列內容，不寫入任何檔案。

    範例：
    - mtxconv inspect data.txt
    """
    matrix, error = load_matrix(input_file)
    if error is None:
        matrix, error = validate_matrix(matrix, source=input_file)

    if error is not None:
        console.print(f"[red]錯誤：{escape(error.message)}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"{escape(input_file.name)}：{len(matrix)} 列 x {len(matrix[0])} 欄")
    table.add_column("列", style="cyan", justify="right")
    table.add_column("數值", style="green")

    for row_no, row in enumerate(matrix[:PREVIEW_ROWS], start=1):
        table.add_row(str(row_no), " ".join(format_value(v) for v in row))
    if len(matrix) > PREVIEW_ROWS:
        table.add_row("…", f"另有 {len(matrix) - PREVIEW_ROWS} 列")

    console.print(table)


@app.command()
def gui() -> None:
    """
    啟動圖形介面 (GUI)
    """
    try:
        from mtxconv.gui.main import main as gui_main
        gui_main()
    except ImportError as e:
        console.print(f"[red]無法啟動 GUI：{e}[/red]")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
