"""Tkinter GUI application for the required return calculator."""
from __future__ import annotations

import logging
import tkinter as tk
from tkinter import filedialog, messagebox, scrolledtext, ttk
from typing import Dict, Optional

from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg, NavigationToolbar2Tk
from matplotlib.figure import Figure

from ..charting import plot_model
from ..computation import FIELD_LABELS, Evaluation, evaluate_text, resolve_use_numpy
from ..reporting import CASHFLOW_HEADER, CHART_NOTE, cashflow_rows, export_csv, panel_state
from ..validation import DEFAULT_INPUTS, FIELD_ORDER

logger = logging.getLogger(__name__)

FIELD_HINTS = {
    "market_price": "Current price per share",
    "dividend_amount": "Annual dividend per share",
    "growth_rate_percent": "Expected annual growth",
}


class App(tk.Tk):
    def __init__(self) -> None:
        super().__init__()
        self.title("Required Return Calculator")
        self.geometry("1100x860")
        self._engine_var = tk.StringVar(value="auto")
        self._field_vars: Dict[str, tk.StringVar] = {}
        self._field_entries: Dict[str, ttk.Entry] = {}
        self._last: Optional[Evaluation] = None

        self._build_menu()
        self._build_inputs()
        self._build_messages()
        self._build_results()
        self._recompute()

    # ---------- Menu / Help ----------
    def _build_menu(self) -> None:
        menubar = tk.Menu(self)
        filemenu = tk.Menu(menubar, tearoff=0)
        filemenu.add_command(label="Export Cash Flows CSV…", command=self._export_csv)
        filemenu.add_separator()
        filemenu.add_command(label="Quit", command=self.destroy)
        menubar.add_cascade(label="File", menu=filemenu)
        settings = tk.Menu(menubar, tearoff=0)
        for value, label in (
            ("auto", "Engine: Auto"),
            ("numpy", "Engine: NumPy"),
            ("python", "Engine: Pure Python"),
        ):
            settings.add_radiobutton(
                label=label,
                value=value,
                variable=self._engine_var,
                command=self._recompute,
            )
        menubar.add_cascade(label="Settings", menu=settings)
        helpmenu = tk.Menu(menubar, tearoff=0)
        helpmenu.add_command(label="How it works", command=self._open_help)
        menubar.add_cascade(label="Help", menu=helpmenu)
        self.config(menu=menubar)

    def _open_help(self) -> None:
        win = tk.Toplevel(self)
        win.title("Required Return — How it works")
        win.geometry("720x520")
        txt = scrolledtext.ScrolledText(win, wrap="word")
        txt.pack(fill="both", expand=True)
        txt.insert(
            "end",
            """\
GORDON GROWTH MODEL
-------------------
The constant-growth dividend discount model values a share as the present value
of a dividend stream that grows at the same rate forever. Solving it for the
discount rate gives the return investors require at today's price:

    r = (D1 / P) + g        where D1 = D0 x (1 + g)

• D0: current annual dividend per share
• D1: next year's dividend
• P:  current market price
• g:  constant annual dividend growth

INPUTS
------
• Market Price: $1 to $500
• Current Dividend: $0 to $50
• Growth Rate (%): 0 to 25

Results update as you type. Out-of-range values are listed under the inputs and
the results are hidden until they are corrected.

CHART
-----
• Red bar: the initial purchase of one share at year 0, shown as a negative flow.
• Green bars: the dividend received in years 1 to 10, growing at g.
• Blue line (right axis): the required return, constant across the horizon.

The model only makes sense when the growth rate is below the required return;
otherwise a warning is shown instead of the results.
""",
        )
        txt.config(state="disabled")

    # ---------- layout ----------
    def _build_inputs(self) -> None:
        frm = ttk.LabelFrame(self, text="Required Return Calculator")
        frm.pack(side=tk.TOP, fill=tk.X, padx=8, pady=6)

        defaults = {
            "market_price": DEFAULT_INPUTS.market_price,
            "dividend_amount": DEFAULT_INPUTS.dividend_amount,
            "growth_rate_percent": DEFAULT_INPUTS.growth_rate_percent,
        }
        for col, field in enumerate(FIELD_ORDER):
            label, hint = FIELD_LABELS[field], FIELD_HINTS[field]
            ttk.Label(frm, text=f"{label} *").grid(row=0, column=col * 2, sticky="w", padx=(6, 2))
            var = tk.StringVar(value=f"{defaults[field]:.2f}")
            entry = ttk.Entry(frm, width=10, textvariable=var)
            entry.grid(row=0, column=col * 2 + 1, padx=(0, 12), pady=4, sticky="w")
            ttk.Label(frm, text=hint, foreground="#555555").grid(
                row=1, column=col * 2, columnspan=2, sticky="w", padx=6, pady=(0, 4)
            )
            var.trace_add("write", self._on_input_changed)
            self._field_vars[field] = var
            self._field_entries[field] = entry

    def _build_messages(self) -> None:
        self.lbl_messages = ttk.Label(self, text="", foreground="#991b1b", justify="left")
        self.lbl_messages.pack(side=tk.TOP, fill=tk.X, padx=12)

    def _build_results(self) -> None:
        body = ttk.Frame(self)
        body.pack(side=tk.TOP, fill=tk.BOTH, expand=True, padx=8, pady=6)

        results = ttk.LabelFrame(body, text="Results")
        results.pack(side=tk.LEFT, fill=tk.Y, padx=(0, 6))
        self.txt = scrolledtext.ScrolledText(results, wrap="word", width=36, height=16)
        self.txt.pack(fill=tk.BOTH, expand=True)
        self.txt.configure(state="disabled")

        chart = ttk.LabelFrame(body, text="Required Return Analysis")
        chart.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        self.fig = Figure(figsize=(7.6, 5.0), dpi=100)
        self.canvas = FigureCanvasTkAgg(self.fig, master=chart)
        self.canvas.get_tk_widget().pack(side=tk.TOP, fill=tk.BOTH, expand=True)
        self.toolbar = NavigationToolbar2Tk(self.canvas, chart)
        self.toolbar.update()
        self.lbl_chart_note = ttk.Label(
            chart,
            text=CHART_NOTE,
            wraplength=640,
        )
        self.lbl_chart_note.pack(side=tk.TOP, fill=tk.X, pady=(4, 2))

    # ---------- computation / rendering ----------
    def _on_input_changed(self, *_: object) -> None:
        self._recompute()

    def _recompute(self) -> None:
        texts = [self._field_vars[field].get() for field in FIELD_ORDER]
        use_numpy = resolve_use_numpy(self._engine_var.get() or "auto")
        self._last = evaluate_text(*texts, use_numpy=use_numpy)
        self._render(self._last)

    def _set_text(self, lines) -> None:
        self.txt.configure(state="normal")
        self.txt.delete("1.0", "end")
        self.txt.insert("end", "\n".join(lines))
        self.txt.configure(state="disabled")

    def _render(self, evaluation: Evaluation) -> None:
        state = panel_state(evaluation)
        self.fig.clear()
        self.lbl_messages.configure(text=state.message)
        self._set_text(state.summary)
        self.lbl_chart_note.configure(text=state.chart_note)
        if state.show_chart:
            ax = self.fig.add_subplot(111)
            plot_model(ax, evaluation.model)
            self.fig.tight_layout()
        self.canvas.draw_idle()

    def _export_csv(self) -> None:
        evaluation = self._last
        if evaluation is None or evaluation.status != "ok":
            messagebox.showinfo("Export", "Enter valid inputs before exporting.")
            return
        path = filedialog.asksaveasfilename(
            title="Export CSV",
            defaultextension=".csv",
            filetypes=[("CSV files", "*.csv")],
        )
        if not path:
            return
        try:
            export_csv(path, CASHFLOW_HEADER, cashflow_rows(evaluation.model))
        except OSError as exc:
            messagebox.showerror("Error", str(exc))
            return
        messagebox.showinfo("Export", f"CSV exported to {path}")


def run() -> None:
    App().mainloop()


__all__ = ["run", "App"]
