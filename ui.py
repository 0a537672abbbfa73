"""
Cosmic TicTacToe UI
A graphical interface for the game using Tkinter.

Shows:
- The board (click a cell to play)
- Game status and whose move it is
- Mode selection (VS Player / VS Bot)
- Difficulty level selection
"""

import cv2
import tkinter as tk
from tkinter import ttk
from PIL import Image, ImageTk
from typing import Optional

from logic.ai_player import Difficulty
from logic.config import GameConfig
from logic.game_controller import GameController
from render.board_renderer import BoardRenderer
from render.config import RenderConfig


class TkScheduler:
    """Bot timer on top of the Tk event loop."""

    def __init__(self, root: tk.Tk):
        self.root = root

    def schedule(self, delay_ms: int, callback) -> str:
        return self.root.after(delay_ms, callback)

    def cancel(self, handle: Optional[str]):
        if handle is not None:
            self.root.after_cancel(handle)


class TicTacToeUI:
    """
    Main UI class for Cosmic TicTacToe.
    """

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        render_config: Optional[RenderConfig] = None
    ):
        """Initialize the UI."""
        self.renderer = BoardRenderer(render_config)

        # Create UI
        self._create_ui()

        self.controller = GameController(config, scheduler=TkScheduler(self.root))
        self.controller.add_listener(self._refresh)
        self._refresh()

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("Cosmic TicTacToe")
        self.root.configure(bg='#1a1a2e')
        self.root.resizable(False, False)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=20, pady=20)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background='#1a1a2e')
        style.configure('TLabel', background='#1a1a2e', foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 22, 'bold'), foreground='#c4b5fd')
        style.configure('Status.TLabel', font=('Segoe UI', 13), foreground='#ddd6fe')
        style.configure('Toast.TLabel', font=('Segoe UI', 11), foreground='#ffd700')

        ttk.Label(main_frame, text="Cosmic Tic-Tac-Toe", style='Title.TLabel').pack(pady=(0, 5))

        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=(0, 10))

        # Mode section
        mode_frame = ttk.Frame(main_frame)
        mode_frame.pack(pady=5)

        self.btn_vs_player = tk.Button(
            mode_frame,
            text="👥 VS Player",
            font=('Segoe UI', 10, 'bold'),
            width=12,
            command=lambda: self._safe(self.controller.set_vs_bot, False)
        )
        self.btn_vs_player.pack(side=tk.LEFT, padx=5)

        self.btn_vs_bot = tk.Button(
            mode_frame,
            text="🤖 VS Bot",
            font=('Segoe UI', 10, 'bold'),
            width=12,
            command=lambda: self._safe(self.controller.set_vs_bot, True)
        )
        self.btn_vs_bot.pack(side=tk.LEFT, padx=5)

        # Difficulty section (only meaningful against the bot)
        self.diff_frame = ttk.Frame(main_frame)
        self.diff_frame.pack(pady=5)

        diff_buttons = [
            ("Easy", Difficulty.RANDOM, "#4ade80"),
            ("Hard", Difficulty.OPTIMAL, "#f87171"),
        ]

        self.diff_buttons = {}
        for text, value, color in diff_buttons:
            btn = tk.Button(
                self.diff_frame,
                text=text,
                font=('Segoe UI', 10, 'bold'),
                width=8,
                activebackground=color,
                command=lambda v=value: self._safe(self.controller.set_difficulty, v)
            )
            btn.pack(side=tk.LEFT, padx=5)
            self.diff_buttons[value] = (btn, color)

        # Board canvas
        size = self.renderer.config.BOARD_OUTPUT_SIZE
        self.board_canvas = tk.Canvas(
            main_frame, width=size, height=size, bg='#0f0f1a',
            highlightthickness=2, highlightbackground='#a78bfa'
        )
        self.board_canvas.pack(pady=10)
        self.board_canvas.bind("<Button-1>", self._on_canvas_click)

        self.toast_label = ttk.Label(main_frame, text="", style='Toast.TLabel')
        self.toast_label.pack(pady=5)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="🔄 Reset Game",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=14,
            command=lambda: self._safe(self.controller.reset_game)
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="✕ Quit",
            font=('Segoe UI', 11),
            bg='#ef4444',
            fg='white',
            width=10,
            command=self._quit
        ).pack(side=tk.LEFT, padx=5)

        # Bind close event
        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _safe(self, func, *args):
        """Run an event handler without letting an error kill the Tk loop."""
        try:
            func(*args)
        except Exception as e:
            print(f"UI error: {e}")

    def _on_canvas_click(self, event):
        index = self.renderer.cell_at(event.x, event.y)
        if index is not None:
            self._safe(self.controller.handle_click, index)

    def _refresh(self):
        """Redraw the board and update labels."""
        controller = self.controller

        self.status_label.configure(text=controller.status_text())

        # Mode buttons
        active = {'bg': '#7c3aed', 'fg': 'white'}
        inactive = {'bg': '#2d3748', 'fg': '#ddd6fe'}
        self.btn_vs_bot.configure(**(active if controller.vs_bot else inactive))
        self.btn_vs_player.configure(**(inactive if controller.vs_bot else active))

        # Difficulty buttons
        for value, (btn, color) in self.diff_buttons.items():
            if not controller.vs_bot:
                btn.configure(state='disabled', bg='#2d3748', fg='#6b7280')
            elif value == controller.difficulty:
                btn.configure(state='normal', bg=color, fg='black')
            else:
                btn.configure(state='normal', bg='#2d3748', fg='white')

        notification = controller.last_notification
        if notification is not None:
            self.toast_label.configure(text=f"{notification.title} {notification.description}")
        elif controller.bot_pending:
            self.toast_label.configure(text="Bot is thinking...")
        else:
            self.toast_label.configure(text="")

        self._update_board_canvas()

    def _update_board_canvas(self):
        """Update the board canvas with a freshly rendered image."""
        img = self.renderer.render(
            self.controller.game_state.board,
            self.controller.winning_line()
        )

        # Convert BGR to RGB
        img_rgb = cv2.cvtColor(img, cv2.COLOR_BGR2RGB)

        # Convert to PIL Image
        image = Image.fromarray(img_rgb)
        photo = ImageTk.PhotoImage(image)

        self.board_canvas.delete("all")
        self.board_canvas.create_image(0, 0, anchor=tk.NW, image=photo)
        self.board_canvas.image = photo  # Keep reference

    def _quit(self):
        """Quit the application."""
        print("Quitting...")
        self.controller.shutdown()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.root.mainloop()
