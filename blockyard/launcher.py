"""A small window that keeps a list of programs and starts the selected ones."""

from __future__ import annotations

import argparse
import queue
import subprocess
import sys
import threading
import time
from dataclasses import dataclass, field
from os import PathLike
from typing import Any, Callable, Optional, Sequence, Union

TITLE = "Application Launcher"
PLACEHOLDER = "select an app"
LAUNCH_DELAY = 1.0

Spawner = Callable[[list[str]], Any]
Sleeper = Callable[[float], Any]


@dataclass
class AppEntry:
    """One program in the list and whether it is ticked for launching."""

    path: str
    selected: bool = False


@dataclass
class AppLauncher:
    """State of the launcher: the program list and whether a launch is running."""

    applications: list[AppEntry] = field(
        default_factory=lambda: [AppEntry(PLACEHOLDER)]
    )
    input_path: str = ""
    is_launching: bool = False

    def title(self) -> str:
        """Window title."""
        return TITLE

    def _valid(self, index: int) -> bool:
        return 0 <= index < len(self.applications)

    def add_application(self) -> None:
        """Append an entry holding the pending input path, then clear the input."""
        self.applications.append(AppEntry(self.input_path))
        self.input_path = ""

    def remove_application(self, index: int) -> None:
        """Remove the entry at index; out-of-range indexes are ignored."""
        if self._valid(index):
            del self.applications[index]

    def file_selected(
        self, index: int, path: Optional[Union[str, PathLike]]
    ) -> None:
        """Set the path of an entry from a file dialog; None means cancelled."""
        if path is not None and self._valid(index):
            self.applications[index].path = str(path)

    def toggle(self, index: int) -> None:
        """Flip the selection of the entry at index, if it exists."""
        if self._valid(index):
            entry = self.applications[index]
            entry.selected = not entry.selected

    def start_launch(self) -> Optional[list[str]]:
        """Mark a launch as running and return the selected paths.

        Returns None when a launch is already running.
        """
        if self.is_launching:
            return None
        self.is_launching = True
        return [entry.path for entry in self.applications if entry.selected]

    def finish_launch(self) -> None:
        """Mark the running launch as done."""
        self.is_launching = False


def launch_command(app_path: str) -> list[str]:
    """Command line that starts a program; bundles ending in .app go through open."""
    if app_path.endswith(".app"):
        return ["open", app_path]
    return [app_path]


def launch_applications(
    apps: Sequence[str],
    spawn: Spawner = subprocess.Popen,
    sleep: Sleeper = time.sleep,
) -> list[str]:
    """Start each program in turn, pausing after every successful start.

    Failures are reported on stderr and skipped. Returns the paths started.
    """
    started = []
    for app_path in apps:
        print(f"Launching application: {app_path}")
        try:
            spawn(launch_command(app_path))
        except OSError as exc:
            print(f"Failed to launch {app_path}: {exc}", file=sys.stderr)
            continue
        print(f"Successfully launched: {app_path}")
        started.append(app_path)
        sleep(LAUNCH_DELAY)
    return started


class _LauncherWindow:
    def __init__(self, root: Any) -> None:
        import tkinter as tk

        self._tk = tk
        self._root = root
        self._state = AppLauncher()
        self._done: "queue.Queue[bool]" = queue.Queue()

        root.title(self._state.title())
        root.geometry("640x420")

        outer = tk.Frame(root, padx=20, pady=20)
        outer.pack(fill=tk.BOTH, expand=True)

        tk.Label(outer, text=TITLE, font=("TkDefaultFont", 24), anchor="w").pack(
            fill=tk.X
        )

        holder = tk.Frame(outer)
        holder.pack(fill=tk.BOTH, expand=True, pady=10)
        canvas = tk.Canvas(holder, highlightthickness=0)
        scrollbar = tk.Scrollbar(holder, orient=tk.VERTICAL, command=canvas.yview)
        canvas.configure(yscrollcommand=scrollbar.set)
        scrollbar.pack(side=tk.RIGHT, fill=tk.Y)
        canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        self._list = tk.Frame(canvas)
        window_id = canvas.create_window((0, 0), window=self._list, anchor="nw")
        self._list.bind(
            "<Configure>",
            lambda _e: canvas.configure(scrollregion=canvas.bbox("all")),
        )
        canvas.bind(
            "<Configure>", lambda e: canvas.itemconfigure(window_id, width=e.width)
        )

        controls = tk.Frame(outer, pady=10)
        controls.pack(fill=tk.X)
        self._launch_button = tk.Button(controls, command=self._on_launch)
        self._launch_button.pack(side=tk.RIGHT, padx=5)
        tk.Button(controls, text="Add Program", command=self._on_add).pack(
            side=tk.RIGHT, padx=5
        )

        self._render()
        root.after(100, self._poll)

    def _render(self) -> None:
        tk = self._tk
        for child in self._list.winfo_children():
            child.destroy()
        for index, entry in enumerate(self._state.applications):
            row = tk.Frame(self._list, pady=5, padx=5)
            row.pack(fill=tk.X)
            path_var = tk.StringVar(value=entry.path)
            tk.Entry(row, textvariable=path_var, state="readonly").pack(
                side=tk.LEFT, fill=tk.X, expand=True, padx=5
            )
            selected_var = tk.BooleanVar(value=entry.selected)
            check = tk.Checkbutton(
                row,
                variable=selected_var,
                command=lambda i=index: self._on_toggle(i),
            )
            check.var = selected_var  # keep the variable alive with the widget
            check.pack(side=tk.LEFT, padx=5)
            tk.Button(
                row, text="Select App", command=lambda i=index: self._on_pick(i)
            ).pack(side=tk.LEFT, padx=5)
            tk.Button(
                row, text="Delete", command=lambda i=index: self._on_remove(i)
            ).pack(side=tk.LEFT, padx=5)
        self._launch_button.configure(
            text="Launching..." if self._state.is_launching else "Launch"
        )

    def _on_add(self) -> None:
        self._state.add_application()
        self._render()

    def _on_remove(self, index: int) -> None:
        self._state.remove_application(index)
        self._render()

    def _on_toggle(self, index: int) -> None:
        self._state.toggle(index)
        self._render()

    def _on_pick(self, index: int) -> None:
        from tkinter import filedialog

        chosen = filedialog.askopenfilename(
            title="Select Application",
            filetypes=[("Applications", "*.app *.exe *.dmg"), ("All Files", "*")],
        )
        self._state.file_selected(index, chosen or None)
        self._render()

    def _on_launch(self) -> None:
        apps = self._state.start_launch()
        if apps is None:
            return
        self._render()
        threading.Thread(target=self._run_launch, args=(apps,), daemon=True).start()

    def _run_launch(self, apps: list[str]) -> None:
        try:
            launch_applications(apps)
        finally:
            self._done.put(True)

    def _poll(self) -> None:
        try:
            while True:
                self._done.get_nowait()
                self._state.finish_launch()
                self._render()
        except queue.Empty:
            pass
        self._root.after(100, self._poll)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the launcher window and run until it is closed."""
    parser = argparse.ArgumentParser(
        prog="launcher", description="Keep a list of programs and start them."
    )
    parser.parse_args(argv)

    import tkinter as tk

    root = tk.Tk()
    _LauncherWindow(root)
    root.mainloop()
    return 0