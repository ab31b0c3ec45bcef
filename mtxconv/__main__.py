"""矩陣文字檔轉換工具 - 套件入口點

支援以 `python -m mtxconv` 方式啟動。
"""

import sys


def main() -> None:
    """主入口點"""
    import os
    # 強制使用 UTF-8 編碼 (Windows 環境修復)
    if sys.platform == 'win32':
        if hasattr(sys.stdout, 'reconfigure'):
            sys.stdout.reconfigure(encoding='utf-8', errors='replace')
        if hasattr(sys.stderr, 'reconfigure'):
            sys.stderr.reconfigure(encoding='utf-8', errors='replace')
        os.environ['PYTHONIOENCODING'] = 'utf-8'

    if len(sys.argv) == 1:
        # 無參數時，啟動 GUI
        from mtxconv.gui.main import main as gui_main
        gui_main()
    else:
        # 有參數時，啟動 CLI (Typer)
        from mtxconv.cli.main import app
        app(prog_name="mtxconv")


if __name__ == "__main__":
    main()
