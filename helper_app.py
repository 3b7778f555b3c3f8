"""Tkinter GUI: start window with a link to the caseworker date helper."""

from __future__ import annotations

import os
from typing import Optional

import tkinter as tk
from tkinter import filedialog, messagebox
from tkinter import ttk

from caseworker import (
    ParsedDates,
    export_results,
    process_text,
    read_text_file,
    table_rows,
    validate_out_file,
)

HOME_TITLE = "Helper"
APP_TITLE = "Caseworker Helper"
TEXT_FONT = ("Courier", 12)
HEADING_FONT = ("Segoe UI", 16, "bold")
LINK_FONT = ("Segoe UI", 11, "underline")


class CaseworkerHelper(tk.Toplevel):
    def __init__(self, master: tk.Misc) -> None:
        super().__init__(master)
        self.title(APP_TITLE)
        self.geometry("760x720")
        self.parsed: Optional[ParsedDates] = None
        self._build_widgets()

    def _build_widgets(self) -> None:
        pad = {"padx": 8, "pady": 4}

        tk.Label(self, text=APP_TITLE, font=HEADING_FONT, anchor="w").grid(row=0, column=0, columnspan=3, sticky="w", **pad)
        tk.Label(
            self,
            text="Lim inn rådata fra systemet. Trykk på «Trekk ut viktige datoer» for å få oversikt.",
            anchor="w",
        ).grid(row=1, column=0, columnspan=3, sticky="w", **pad)

        self.raw_text = tk.Text(self, width=90, height=14, font=TEXT_FONT, undo=True)
        self.raw_text.grid(row=2, column=0, columnspan=3, sticky="nsew", **pad)
        self.grid_rowconfigure(2, weight=1)
        self.grid_columnconfigure(1, weight=1)

        tk.Button(self, text="Trekk ut viktige datoer", command=self._extract, bg="#0078D4", fg="white").grid(row=3, column=0, sticky="w", **pad)
        tk.Button(self, text="Åpne tekstfil…", command=self._open_file).grid(row=3, column=1, sticky="w", **pad)
        tk.Button(self, text="Lagre tabell…", command=self._save).grid(row=3, column=2, sticky="e", **pad)

        # Results stay hidden until the first extraction
        self.results_frame = tk.Frame(self)
        tk.Label(self.results_frame, text="Viktige datoer", font=HEADING_FONT, anchor="w").grid(row=0, column=0, sticky="w")
        self.table = ttk.Treeview(self.results_frame, columns=("Felt", "Dato"), show="headings", height=6)
        self.table.heading("Felt", text="Felt")
        self.table.heading("Dato", text="Dato")
        self.table.column("Felt", width=220)
        self.table.column("Dato", width=160)
        self.table.grid(row=1, column=0, sticky="nsew")
        self.results_frame.grid_columnconfigure(0, weight=1)

        self.log = tk.Text(self, width=90, height=6, state="disabled")
        self.log.grid(row=5, column=0, columnspan=3, sticky="nsew", padx=8, pady=(2, 8))

    def _append_log(self, message: str) -> None:
        self.log.configure(state="normal")
        self.log.insert("end", message + "\n")
        self.log.see("end")
        self.log.configure(state="disabled")

    def _clear_log(self) -> None:
        self.log.configure(state="normal")
        self.log.delete("1.0", "end")
        self.log.configure(state="disabled")

    def _extract(self) -> None:
        raw = self.raw_text.get("1.0", "end-1c")
        self._clear_log()
        self.parsed = process_text(raw, log=self._append_log)

        for iid in self.table.get_children():
            self.table.delete(iid)
        for label, value in table_rows(self.parsed):
            self.table.insert("", "end", values=(label, value))
        self.results_frame.grid(row=4, column=0, columnspan=3, sticky="nsew", padx=8, pady=(12, 4))

    def _open_file(self) -> None:
        path = filedialog.askopenfilename(filetypes=[("Tekst", "*.txt"), ("Alle filer", "*.*")])
        if not path:
            return
        try:
            content = read_text_file(path)
        except OSError as exc:
            messagebox.showerror("Åpne fil", f"Kunne ikke lese filen: {exc}", parent=self)
            return
        self.raw_text.delete("1.0", "end")
        self.raw_text.insert("1.0", content)
        self._append_log(f"Lastet inn {os.path.basename(path)}")

    def _save(self) -> None:
        if self.parsed is None:
            messagebox.showerror("Lagre", "Trekk ut datoer først.", parent=self)
            return
        out_file = filedialog.asksaveasfilename(
            defaultextension=".csv", filetypes=[("CSV", "*.csv"), ("Excel", "*.xlsx")], parent=self
        )
        if not out_file:
            return
        err = validate_out_file(out_file)
        if err:
            messagebox.showerror("Lagre", err, parent=self)
            return
        try:
            export_results(self.parsed, out_file)
        except Exception as exc:  # noqa: BLE001
            messagebox.showerror("Lagre", f"Kunne ikke lagre: {exc}", parent=self)
            return
        self._append_log(f"Lagret tabell til {out_file}")


class HomeWindow(tk.Tk):
    def __init__(self) -> None:
        super().__init__()
        self.title(HOME_TITLE)
        self.helper: Optional[CaseworkerHelper] = None

        tk.Label(self, text="Velkommen til Helper", font=HEADING_FONT).grid(row=0, column=0, sticky="w", padx=16, pady=(16, 8))
        link = tk.Label(self, text="• Caseworker Helper", font=LINK_FONT, fg="#0645AD", cursor="hand2")
        link.grid(row=1, column=0, sticky="w", padx=24, pady=(0, 16))
        link.bind("<Button-1>", lambda _e: self._open_helper())

    def _open_helper(self) -> None:
        if self.helper is not None and self.helper.winfo_exists():
            self.helper.lift()
            self.helper.focus_set()
            return
        self.helper = CaseworkerHelper(self)


def main() -> None:
    app = HomeWindow()
    app.mainloop()


if __name__ == "__main__":
    main()
