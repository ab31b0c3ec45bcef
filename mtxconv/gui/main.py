"""GUI 主模組 (tkinter)"""

import logging
import queue
import threading
from typing import Optional
import tkinter as tk
from tkinter import ttk, filedialog, messagebox

from mtxconv.core import ConversionRequest, GuiConfig, load_gui_config, save_gui_config
from mtxconv.core.converter import ConversionOutcome, run_conversion
from mtxconv.core.validation import validate_input_file, validate_output_target

logger = logging.getLogger(__name__)

# 成功訊息在狀態列停留的時間（毫秒）
STATUS_TIMEOUT_MS = 3000


class ConversionWorker(threading.Thread):
    """背景轉檔執行緒

    結果以 ("finished", outcome) 或 ("error", 訊息) 放入佇列，
    由 GUI 執行緒取出並更新畫面。
    """

    def __init__(self, request: ConversionRequest, result_queue: queue.Queue):
        super().__init__(daemon=True)
        self.request = request
        self.result_queue = result_queue

    def run(self) -> None:
        """執行轉檔（在背景執行緒中）"""
        try:
            outcome = run_conversion(self.request)
        except Exception as e:
            logger.exception("轉檔時發生未預期的錯誤")
            self.result_queue.put(("error", str(e)))
            return

        self.result_queue.put(("finished", outcome))


class MainWindow:
    """主視窗"""

    def __init__(self, root: tk.Tk):
        self.root = root
        self.root.title("矩陣文字檔轉換工具")
        self.root.geometry("640x260")
        self.root.minsize(520, 240)

        self.worker: Optional[ConversionWorker] = None
        self.result_queue: queue.Queue = queue.Queue()
        self._clear_status_job: Optional[str] = None

        self._setup_ui()
        self._load_config()
        self.root.protocol("WM_DELETE_WINDOW", self._on_close)

    def _setup_ui(self) -> None:
        """建立 UI"""
        main_frame = ttk.Frame(self.root, padding="10")
        main_frame.pack(fill=tk.BOTH, expand=True)

        # 輸入檔案
        input_frame = ttk.LabelFrame(main_frame, text="輸入", padding="10")
        input_frame.pack(fill=tk.X, pady=(0, 10))

        ttk.Label(input_frame, text="輸入檔案：").grid(row=0, column=0, sticky=tk.W, pady=2)
        self.input_var = tk.StringVar()
        self.input_entry = ttk.Entry(input_frame, textvariable=self.input_var, width=50)
        self.input_entry.grid(row=0, column=1, sticky=tk.EW, padx=5, pady=2)
        ttk.Button(input_frame, text="瀏覽...", command=self._browse_input).grid(row=0, column=2, pady=2)

        self.transpose_var = tk.BooleanVar(value=False)
        ttk.Checkbutton(input_frame, text="轉置矩陣", variable=self.transpose_var).grid(
            row=1, column=1, sticky=tk.W, padx=5
        )
        input_frame.columnconfigure(1, weight=1)

        # 輸出檔案
        output_frame = ttk.LabelFrame(main_frame, text="輸出", padding="10")
        output_frame.pack(fill=tk.X, pady=(0, 10))

        ttk.Label(output_frame, text="輸出檔案/樣式：").grid(row=0, column=0, sticky=tk.W, pady=2)
        self.output_var = tk.StringVar()
        self.output_entry = ttk.Entry(output_frame, textvariable=self.output_var, width=50)
        self.output_entry.grid(row=0, column=1, sticky=tk.EW, padx=5, pady=2)
        ttk.Button(output_frame, text="瀏覽...", command=self._browse_output).grid(row=0, column=2, pady=2)

        self.split_var = tk.BooleanVar(value=False)
        ttk.Checkbutton(output_frame, text="每列輸出一個檔案", variable=self.split_var).grid(
            row=1, column=1, sticky=tk.W, padx=5
        )

        ttk.Label(output_frame, text="替換字元：").grid(row=2, column=0, sticky=tk.W, pady=2)
        self.token_var = tk.StringVar(value="#")
        self.token_entry = ttk.Entry(output_frame, textvariable=self.token_var, width=10)
        self.token_entry.grid(row=2, column=1, sticky=tk.W, padx=5, pady=2)
        output_frame.columnconfigure(1, weight=1)

        self.convert_btn = ttk.Button(main_frame, text="開始轉檔", command=self._start_conversion)
        self.convert_btn.pack(anchor=tk.W)

        # 狀態列
        self.status_var = tk.StringVar(value="就緒")
        status_bar = ttk.Label(main_frame, textvariable=self.status_var, relief=tk.SUNKEN, anchor=tk.W)
        status_bar.pack(fill=tk.X, side=tk.BOTTOM, pady=(10, 0))

    def _load_config(self) -> None:
        """載入上次的欄位內容"""
        config = load_gui_config()
        self.input_var.set(config.input_file)
        self.transpose_var.set(config.transpose)
        self.split_var.set(config.split_per_row)
        self.output_var.set(config.output_pattern)
        self.token_var.set(config.replace_token)

    def _current_config(self) -> GuiConfig:
        """取得目前的欄位內容"""
        return GuiConfig(
            input_file=self.input_var.get().strip(),
            transpose=self.transpose_var.get(),
            split_per_row=self.split_var.get(),
            output_pattern=self.output_var.get().strip(),
            replace_token=self.token_var.get(),
        )

    def _on_close(self) -> None:
        """關閉視窗前儲存欄位內容"""
        save_gui_config(self._current_config())
        self.root.destroy()

    def _browse_input(self) -> None:
        """選擇輸入檔案"""
        file_path = filedialog.askopenfilename(title="選擇輸入檔案")
        if file_path:
            self.input_var.set(file_path)

    def _browse_output(self) -> None:
        """選擇輸出檔案或檔名樣式"""
        file_path = filedialog.asksaveasfilename(title="選擇輸出檔案或檔名樣式")
        if file_path:
            self.output_var.set(file_path)

    def _show_status(self, text: str, timeout_ms: Optional[int] = None) -> None:
        """顯示狀態列訊息，可在指定時間後恢復為「就緒」"""
        if self._clear_status_job is not None:
            self.root.after_cancel(self._clear_status_job)
            self._clear_status_job = None

        self.status_var.set(text)
        if timeout_ms is not None:
            self._clear_status_job = self.root.after(timeout_ms, lambda: self._show_status("就緒"))

    def _start_conversion(self) -> None:
        """開始轉檔"""
        if self.worker is not None:
            return

        config = self._current_config()

        valid, error = validate_input_file(config.input_file)
        if valid:
            valid, error = validate_output_target(config.output_pattern, config.split_per_row, config.replace_token)
        if not valid:
            messagebox.showwarning("警告", error)
            return

        self.convert_btn.config(state=tk.DISABLED)
        self._show_status("轉檔中...")

        self.result_queue = queue.Queue()
        self.worker = ConversionWorker(config.to_request(), self.result_queue)
        self.worker.start()

        self._check_queue()

    def _check_queue(self) -> None:
        """檢查結果佇列"""
        try:
            msg = self.result_queue.get_nowait()
        except queue.Empty:
            self.root.after(100, self._check_queue)
            return

        if msg[0] == "finished":
            self._on_finished(msg[1])
        elif msg[0] == "error":
            self._on_error(msg[1])

    def _on_finished(self, outcome: ConversionOutcome) -> None:
        """處理轉檔完成"""
        self.convert_btn.config(state=tk.NORMAL)
        self.worker = None

        if outcome.success:
            logger.info(outcome.format_summary())
            self._show_status(outcome.message, timeout_ms=STATUS_TIMEOUT_MS)
        else:
            logger.error(f"轉檔失敗：{outcome.message}")
            self._on_error(outcome.message)

    def _on_error(self, error_msg: str) -> None:
        """處理錯誤"""
        self.convert_btn.config(state=tk.NORMAL)
        self.worker = None
        self._show_status("發生錯誤")

        messagebox.showerror("錯誤", error_msg)


def main() -> None:
    """GUI 入口點"""
    from mtxconv.core.logging_config import setup_logging
    from mtxconv.core.paths import get_log_dir

    setup_logging(verbose=False, log_dir=get_log_dir(), console=None)

    root = tk.Tk()
    MainWindow(root)
    root.mainloop()


if __name__ == "__main__":
    main()
