"""Tkinter desktop app for multi-word anagram solving."""

from __future__ import annotations

import logging
import queue
import threading
import tkinter as tk
from dataclasses import replace
from pathlib import Path
from tkinter import filedialog, messagebox, ttk

from models import SolveError, SolveOptions, SolveReport, WordListLoadResult
from solver import AnagramSolver
from utils import export_report, load_config, options_from_config, options_to_config, save_config, setup_logging


class AnagramApp(tk.Tk):
    """Desktop UI for loading a wordlist and rearranging phrases into words."""

    def __init__(self) -> None:
        super().__init__()
        setup_logging()
        self.logger = logging.getLogger(__name__)

        self.title("Anagram Phrase Solver")
        self.geometry("1000x720")
        self.minsize(800, 560)

        self.solver = AnagramSolver()
        self.current_report: SolveReport | None = None
        self.worker_thread: threading.Thread | None = None
        self.worker_queue: queue.Queue[tuple] = queue.Queue()
        self.is_busy = False

        self.config_data = load_config()
        self.base_options = options_from_config(self.config_data)
        self._build_vars()
        self._build_ui()
        self.after(100, self._poll_worker_queue)

    def _build_vars(self) -> None:
        self.wordlist_var = tk.StringVar(value=self.config_data.get("last_wordlist_path", ""))
        self.max_results_var = tk.IntVar(value=self.base_options.max_results)
        self.result_limit_var = tk.IntVar(value=self.base_options.result_limit)
        self.early_exit_var = tk.BooleanVar(value=self.base_options.early_exit)
        self.speed_cache_var = tk.BooleanVar(value=self.base_options.use_speed_cache)
        self.phrase_var = tk.StringVar(value="")
        self.status_var = tk.StringVar(value="Load a wordlist to start.")

    def _build_ui(self) -> None:
        self.columnconfigure(0, weight=1)
        self.rowconfigure(3, weight=1)

        top = ttk.Frame(self, padding=8)
        top.grid(row=0, column=0, sticky="ew")
        top.columnconfigure(1, weight=1)

        ttk.Label(top, text="Wordlist (.txt):").grid(row=0, column=0, sticky="w", padx=(0, 8))
        ttk.Entry(top, textvariable=self.wordlist_var).grid(row=0, column=1, sticky="ew", padx=(0, 8))
        ttk.Button(top, text="Browse", command=self._browse_wordlist).grid(row=0, column=2, padx=(0, 8))
        self.load_button = ttk.Button(top, text="Load", command=self._start_loading)
        self.load_button.grid(row=0, column=3)

        options = ttk.LabelFrame(self, text="Options", padding=8)
        options.grid(row=1, column=0, sticky="ew", padx=8, pady=(0, 6))
        ttk.Label(options, text="Result cap:").grid(row=0, column=0, sticky="w", padx=(0, 4))
        ttk.Spinbox(options, from_=100, to=1_000_000, increment=1000, width=10, textvariable=self.max_results_var).grid(
            row=0, column=1, sticky="w", padx=(0, 12)
        )
        ttk.Label(options, text="Show at most:").grid(row=0, column=2, sticky="w", padx=(0, 4))
        ttk.Spinbox(options, from_=10, to=100_000, increment=100, width=8, textvariable=self.result_limit_var).grid(
            row=0, column=3, sticky="w", padx=(0, 12)
        )
        ttk.Checkbutton(options, text="Skip short words once results pile up", variable=self.early_exit_var).grid(
            row=0, column=4, sticky="w", padx=(0, 12)
        )
        ttk.Checkbutton(options, text="Speed mode (cache wordlist)", variable=self.speed_cache_var).grid(row=0, column=5, sticky="w")

        phrase_row = ttk.Frame(self, padding=(8, 0, 8, 6))
        phrase_row.grid(row=2, column=0, sticky="ew")
        phrase_row.columnconfigure(1, weight=1)
        ttk.Label(phrase_row, text="Phrase:").grid(row=0, column=0, sticky="w", padx=(0, 8))
        phrase_entry = ttk.Entry(phrase_row, textvariable=self.phrase_var, font=("Segoe UI", 11))
        phrase_entry.grid(row=0, column=1, sticky="ew", padx=(0, 8))
        phrase_entry.bind("<Return>", lambda _event: self._start_solving())
        self.solve_button = ttk.Button(phrase_row, text="Solve", command=self._start_solving)
        self.solve_button.grid(row=0, column=2, padx=(0, 8))
        ttk.Button(phrase_row, text="Clear", command=self._clear_input_and_results).grid(row=0, column=3)

        results_frame = ttk.LabelFrame(self, text="Anagrams", padding=8)
        results_frame.grid(row=3, column=0, sticky="nsew", padx=8, pady=(0, 6))
        results_frame.columnconfigure(0, weight=1)
        results_frame.rowconfigure(0, weight=1)
        self.results_tree = ttk.Treeview(
            results_frame,
            columns=("rank", "phrase", "words", "score"),
            show="headings",
            height=18,
        )
        self.results_tree.heading("rank", text="#")
        self.results_tree.heading("phrase", text="Phrase")
        self.results_tree.heading("words", text="Words")
        self.results_tree.heading("score", text="Score")
        self.results_tree.column("rank", width=60, anchor=tk.E)
        self.results_tree.column("phrase", width=560, anchor=tk.W)
        self.results_tree.column("words", width=80, anchor=tk.CENTER)
        self.results_tree.column("score", width=100, anchor=tk.E)
        tree_scroll = ttk.Scrollbar(results_frame, orient=tk.VERTICAL, command=self.results_tree.yview)
        self.results_tree.configure(yscrollcommand=tree_scroll.set)
        self.results_tree.grid(row=0, column=0, sticky="nsew")
        tree_scroll.grid(row=0, column=1, sticky="ns")

        bottom = ttk.Frame(self, padding=8)
        bottom.grid(row=4, column=0, sticky="ew")
        bottom.columnconfigure(0, weight=1)
        ttk.Button(bottom, text="Copy Selected", command=self._copy_selected).grid(row=0, column=1, padx=(0, 8))
        ttk.Button(bottom, text="Save Results", command=self._save_results).grid(row=0, column=2)

        status_row = ttk.Frame(self, padding=(8, 0, 8, 8))
        status_row.grid(row=5, column=0, sticky="ew")
        status_row.columnconfigure(1, weight=1)
        ttk.Label(status_row, text="Status:").grid(row=0, column=0, sticky="w", padx=(0, 8))
        ttk.Label(status_row, textvariable=self.status_var).grid(row=0, column=1, sticky="w")
        self.progress = ttk.Progressbar(status_row, orient=tk.HORIZONTAL, length=220, mode="determinate", maximum=100)
        self.progress.grid(row=0, column=2, sticky="e")

    def _browse_wordlist(self) -> None:
        path = filedialog.askopenfilename(
            title="Select wordlist file",
            filetypes=[("Text files", "*.txt"), ("All files", "*.*")],
        )
        if path:
            self.wordlist_var.set(path)

    def _current_options(self) -> SolveOptions:
        options = replace(
            self.base_options,
            early_exit=self.early_exit_var.get(),
            use_speed_cache=self.speed_cache_var.get(),
        )
        try:
            options.max_results = max(1, int(self.max_results_var.get()))
            options.result_limit = max(1, int(self.result_limit_var.get()))
        except (tk.TclError, ValueError):
            self.logger.warning("Invalid numeric option, keeping previous limits")
        return options

    def _set_busy(self, busy: bool, message: str) -> None:
        self.is_busy = busy
        state = tk.DISABLED if busy else tk.NORMAL
        self.load_button.configure(state=state)
        self.solve_button.configure(state=state)
        self.status_var.set(message)

    def _start_loading(self) -> None:
        if self.is_busy:
            return

        path = self.wordlist_var.get().strip()
        if not path:
            messagebox.showerror("Missing wordlist", "Please select a wordlist file first.")
            return
        resolved = str(Path(path).resolve())
        if not Path(resolved).exists():
            messagebox.showerror("File not found", f"Wordlist does not exist:\n{path}")
            return
        self.wordlist_var.set(resolved)

        self.progress.configure(value=0)
        self._set_busy(True, "Reading wordlist in background...")
        self.worker_thread = threading.Thread(
            target=self._load_worker,
            args=(resolved, self._current_options()),
            daemon=True,
        )
        self.worker_thread.start()

    def _load_worker(self, path: str, options: SolveOptions) -> None:
        try:
            result = self.solver.load_wordlist(
                path,
                options=options,
                progress_callback=lambda pct: self.worker_queue.put(("progress", pct)),
            )
            self.worker_queue.put(("load_done", result))
        except Exception as exc:
            self.logger.exception("Failed loading wordlist")
            self.worker_queue.put(("error", "Wordlist error", f"Failed to load wordlist: {exc}"))

    def _start_solving(self) -> None:
        if self.is_busy:
            return
        if not self.solver.words:
            messagebox.showerror("No wordlist", "Please load a wordlist before solving.")
            return
        current_wordlist = self.wordlist_var.get().strip()
        if current_wordlist and str(Path(current_wordlist).resolve()) != str(Path(self.solver.wordlist_path).resolve()):
            messagebox.showwarning("Reload required", "Selected wordlist differs from the loaded one. Load it first.")
            return

        phrase = self.phrase_var.get()
        options = self._current_options()
        self.progress.configure(mode="indeterminate")
        self.progress.start(20)
        self._set_busy(True, f"Searching anagrams of {phrase.strip()!r}...")
        self.worker_thread = threading.Thread(target=self._solve_worker, args=(phrase, options), daemon=True)
        self.worker_thread.start()

    def _solve_worker(self, phrase: str, options: SolveOptions) -> None:
        try:
            report = self.solver.solve(phrase, options)
            self.worker_queue.put(("solve_done", report, options))
        except SolveError as exc:
            self.worker_queue.put(("error", "Cannot solve", str(exc)))
        except Exception as exc:
            self.logger.exception("Solve failed")
            self.worker_queue.put(("error", "Solve error", f"Could not solve phrase: {exc}"))

    def _poll_worker_queue(self) -> None:
        try:
            while True:
                event = self.worker_queue.get_nowait()
                kind = event[0]
                if kind == "progress":
                    pct = max(0.0, min(float(event[1]), 1.0))
                    self.progress.configure(value=int(pct * 100))
                elif kind == "load_done":
                    self._handle_load_done(event[1])
                elif kind == "solve_done":
                    self._handle_solve_done(event[1], event[2])
                elif kind == "error":
                    self._handle_worker_error(event[1], event[2])
        except queue.Empty:
            pass
        finally:
            self.after(100, self._poll_worker_queue)

    def _stop_progress(self, value: int) -> None:
        self.progress.stop()
        self.progress.configure(mode="determinate", value=value)

    def _handle_load_done(self, result: WordListLoadResult) -> None:
        self._stop_progress(100)
        source = "cache" if result.loaded_from_cache else "wordlist"
        self._set_busy(False, f"Loaded {result.accepted_words} words from {source} ({result.total_lines} lines).")
        self.config_data["last_wordlist_path"] = result.wordlist_path
        save_config(self.config_data)

    def _handle_solve_done(self, report: SolveReport, options: SolveOptions) -> None:
        self._stop_progress(100)
        self.current_report = report
        self._render_results(report)

        message = (
            f"{len(report.results)} anagrams from {report.candidate_count} candidate words "
            f"in {report.elapsed_ms:.0f} ms."
        )
        if report.cap_reached:
            message += " Result cap reached; search stopped early."
        self._set_busy(False, message)

        self.base_options = options
        self.config_data["options"] = options_to_config(options)
        save_config(self.config_data)

    def _handle_worker_error(self, title: str, message: str) -> None:
        self._stop_progress(0)
        self._set_busy(False, "Failed.")
        messagebox.showerror(title, message)

    def _render_results(self, report: SolveReport) -> None:
        self.results_tree.delete(*self.results_tree.get_children())
        for idx, row in enumerate(report.results):
            self.results_tree.insert(
                "",
                tk.END,
                iid=str(idx),
                values=(idx + 1, row.phrase, row.word_count, f"{row.score:.1f}"),
            )

    def _copy_selected(self) -> None:
        if not self.current_report:
            messagebox.showinfo("No results", "Solve a phrase first.")
            return
        selected = self.results_tree.selection()
        phrases = [self.current_report.results[int(iid)].phrase for iid in selected]
        if not phrases:
            messagebox.showinfo("Nothing selected", "Select one or more anagrams to copy.")
            return
        self.clipboard_clear()
        self.clipboard_append("\n".join(phrases))
        self.update_idletasks()
        self.status_var.set(f"Copied {len(phrases)} anagram(s) to clipboard.")

    def _save_results(self) -> None:
        if not self.current_report:
            messagebox.showinfo("No results", "Solve at least once before exporting.")
            return

        json_path_str = filedialog.asksaveasfilename(
            title="Save results JSON (CSV will be saved alongside)",
            defaultextension=".json",
            filetypes=[("JSON files", "*.json"), ("All files", "*.*")],
        )
        if not json_path_str:
            return

        json_path = Path(json_path_str)
        csv_path = json_path.with_suffix(".csv")

        try:
            export_report(
                json_path=json_path,
                csv_path=csv_path,
                report=self.current_report,
                wordlist_path=self.solver.wordlist_path,
                options=self.base_options,
            )
            self.status_var.set(f"Saved: {json_path.name} and {csv_path.name}")
            messagebox.showinfo("Export complete", f"Saved:\n{json_path}\n{csv_path}")
        except Exception as exc:
            self.logger.exception("Export failed")
            messagebox.showerror("Export error", f"Could not save results: {exc}")

    def _clear_input_and_results(self) -> None:
        self.phrase_var.set("")
        self.results_tree.delete(*self.results_tree.get_children())
        self.current_report = None
        self.status_var.set("Cleared input and results.")


def main() -> None:
    app = AnagramApp()
    app.mainloop()


if __name__ == "__main__":
    main()
