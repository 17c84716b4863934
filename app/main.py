import logging
import queue
import tkinter as tk
from tkinter import messagebox, ttk

from api.config import CONTENT_DIR, CONTENT_URL, LOG_LEVEL
from app.tasks import start_load, start_probe
from availability import Availability
from content import ContentSource, DirectoryContentSource, HttpContentSource
from core.logging_setup import setup_console_logging
from errors import ContentUnavailableError, EmptyQuizError
from serialization import (
    OPTION_CORRECT,
    OPTION_INCORRECT,
    serialize_catalog,
    serialize_question,
    serialize_review,
)
from session import QuizController, View

logger = logging.getLogger(__name__)

OPTION_COLORS = {
    OPTION_CORRECT: "#c8e6c9",
    OPTION_INCORRECT: "#ffcdd2",
}
SELECTED_COLOR = "#bbdefb"
BACKGROUND = "#f5f5f5"


def default_source() -> ContentSource:
    if CONTENT_URL:
        return HttpContentSource(CONTENT_URL)
    return DirectoryContentSource(CONTENT_DIR)


class QuizApp(tk.Tk):
    def __init__(self, source: ContentSource | None = None):
        super().__init__()
        self.title("CompTIA Security+ SY0-701")
        self.geometry("1024x720")
        self.minsize(800, 600)
        self._apply_style()

        self.controller = QuizController(source or default_source())
        # background results, drained on the Tk thread
        self.results: queue.Queue = queue.Queue()

        self._build_ui()
        self._render()
        self._start_probe()
        self.after(100, self._poll_results)

    def _build_ui(self) -> None:
        self.container = ttk.Frame(self)
        self.container.pack(fill=tk.BOTH, expand=True)

        self.home_frame = ttk.Frame(self.container, padding=10)
        self.topics_frame = ttk.Frame(self.container, padding=10)
        self.practice_frame = ttk.Frame(self.container, padding=10)
        self.quiz_frame = ttk.Frame(self.container, padding=10)
        self.results_frame = ttk.Frame(self.container, padding=10)
        self.loading_frame = ttk.Frame(self.container, padding=10)

        for frame in (
            self.home_frame,
            self.topics_frame,
            self.practice_frame,
            self.quiz_frame,
            self.results_frame,
            self.loading_frame,
        ):
            frame.grid(row=0, column=0, sticky="nsew")
        self.container.rowconfigure(0, weight=1)
        self.container.columnconfigure(0, weight=1)

        self._build_home_ui()
        self.topics_list = self._build_list_ui(
            self.topics_frame, "Security Topics", "Choose a topic to practice"
        )
        self.practice_list = self._build_list_ui(
            self.practice_frame, "Practice Tests", "Full-length practice exams"
        )
        self._build_quiz_ui()
        self._build_results_ui()
        ttk.Label(
            self.loading_frame, text="Loading quiz...", font=("Segoe UI", 14)
        ).pack(expand=True)

    def _build_home_ui(self) -> None:
        ttk.Label(
            self.home_frame,
            text="CompTIA Security+ SY0-701",
            font=("Segoe UI", 18, "bold"),
        ).pack(anchor=tk.W, pady=5)
        ttk.Label(self.home_frame, text="Practice Quiz Application").pack(anchor=tk.W)
        self.items_label = ttk.Label(self.home_frame, text="", foreground="blue")
        self.items_label.pack(anchor=tk.W, pady=5)

        self.topics_button = ttk.Button(
            self.home_frame, text="Topics", command=self._open_topics
        )
        self.topics_button.pack(fill=tk.X, pady=5)
        self.practice_button = ttk.Button(
            self.home_frame, text="Practice Tests", command=self._open_practice_tests
        )
        self.practice_button.pack(fill=tk.X, pady=5)

    def _build_list_ui(self, frame: ttk.Frame, title: str, subtitle: str) -> tk.Frame:
        header = ttk.Frame(frame)
        header.pack(fill=tk.X)
        ttk.Label(header, text=title, font=("Segoe UI", 16, "bold")).pack(side=tk.LEFT)
        ttk.Button(header, text="Back to Menu", command=self._go_home).pack(side=tk.RIGHT)
        ttk.Label(frame, text=subtitle).pack(anchor=tk.W, pady=5)
        cards = tk.Frame(frame, bg=BACKGROUND)
        cards.pack(fill=tk.BOTH, expand=True)
        return cards

    def _build_quiz_ui(self) -> None:
        header = ttk.Frame(self.quiz_frame)
        header.pack(fill=tk.X)
        self.quiz_title = ttk.Label(header, text="", font=("Segoe UI", 14, "bold"))
        self.quiz_title.pack(side=tk.LEFT)
        ttk.Button(header, text="Home", command=self._go_home).pack(side=tk.RIGHT)

        self.question_label = ttk.Label(self.quiz_frame, text="")
        self.question_label.pack(anchor=tk.W, pady=(5, 0))
        self.progress = ttk.Progressbar(self.quiz_frame, maximum=100)
        self.progress.pack(fill=tk.X, pady=5)

        self.question_text = ttk.Label(
            self.quiz_frame, text="", font=("Segoe UI", 12, "bold"), wraplength=900
        )
        self.question_text.pack(anchor=tk.W, pady=5)
        self.options_container = ttk.Frame(self.quiz_frame)
        self.options_container.pack(fill=tk.BOTH, expand=True)

        self.next_button = ttk.Button(
            self.quiz_frame, text="Next Question", command=self._next_question
        )
        self.next_button.pack(anchor=tk.E, pady=5)

    def _build_results_ui(self) -> None:
        ttk.Label(
            self.results_frame, text="Quiz Complete!", font=("Segoe UI", 16, "bold")
        ).pack(anchor=tk.W)
        self.summary_label = ttk.Label(self.results_frame, text="", foreground="blue")
        self.summary_label.pack(anchor=tk.W, pady=5)

        buttons = ttk.Frame(self.results_frame)
        buttons.pack(fill=tk.X, pady=5)
        ttk.Button(buttons, text="Retry Quiz", command=self._restart).pack(
            side=tk.LEFT, padx=5
        )
        ttk.Button(buttons, text="Back to Menu", command=self._go_home).pack(
            side=tk.LEFT, padx=5
        )

        self.review_canvas = tk.Canvas(self.results_frame, highlightthickness=0, bg=BACKGROUND)
        review_scroll = ttk.Scrollbar(
            self.results_frame, orient=tk.VERTICAL, command=self.review_canvas.yview
        )
        self.review_canvas.configure(yscrollcommand=review_scroll.set)
        review_scroll.pack(side=tk.RIGHT, fill=tk.Y)
        self.review_canvas.pack(fill=tk.BOTH, expand=True)
        self.review_container = tk.Frame(self.review_canvas, bg=BACKGROUND)
        self.review_canvas.create_window((0, 0), window=self.review_container, anchor="nw")
        self.review_container.bind(
            "<Configure>",
            lambda event: self.review_canvas.configure(
                scrollregion=self.review_canvas.bbox("all")
            ),
        )

    def _apply_style(self) -> None:
        style = ttk.Style(self)
        style.theme_use("clam")
        style.configure("TFrame", background=BACKGROUND)
        style.configure("TLabel", background=BACKGROUND, font=("Segoe UI", 10))
        style.configure("TButton", padding=6, font=("Segoe UI", 10))

    # Background work

    def _start_probe(self) -> None:
        start_probe(self.controller.source, self.results)

    def _start_load(self, content_id: str) -> None:
        start_load(self.controller.source, content_id, self.results)

    def _poll_results(self) -> None:
        while True:
            try:
                kind, value = self.results.get_nowait()
            except queue.Empty:
                break
            if kind == "availability":
                self._apply_availability(value)
            elif kind == "loaded":
                self.controller.finish_loading(value)
                self._render()
            elif kind == "failed":
                self.controller.fail_loading()
                self._render()
                if isinstance(value, EmptyQuizError):
                    messagebox.showwarning("Quiz", str(value))
                else:
                    messagebox.showerror("Quiz", str(value))
        self.after(100, self._poll_results)

    def _apply_availability(self, availability: Availability) -> None:
        self.controller.set_availability(availability)
        self._render()

    # Actions

    def _open_topics(self) -> None:
        self.controller.show_topics()
        self._render()

    def _open_practice_tests(self) -> None:
        self.controller.show_practice_tests()
        self._render()

    def _go_home(self) -> None:
        self.controller.go_home()
        self._render()

    def _start_quiz(self, content_id: str) -> None:
        try:
            self.controller.begin_loading(content_id)
        except ContentUnavailableError as exc:
            logger.info("Rejected %s: content file missing", content_id)
            messagebox.showwarning("Not available", str(exc))
            return
        self._render()
        self._start_load(content_id)

    def _select_answer(self, index: int) -> None:
        self.controller.select_answer(index)
        self._render()

    def _next_question(self) -> None:
        if self.controller.advance():
            self._render()

    def _restart(self) -> None:
        self.controller.restart()
        self._render()

    # Rendering

    def _render(self) -> None:
        controller = self.controller
        if controller.loading:
            self.loading_frame.tkraise()
            return
        catalog = serialize_catalog(controller.availability)
        view = controller.view
        if view is View.HOME:
            self._render_home(catalog)
            self.home_frame.tkraise()
        elif view is View.TOPICS:
            self._render_cards(self.topics_list, catalog["topics"])
            self.topics_frame.tkraise()
        elif view is View.PRACTICE_TESTS:
            self._render_cards(self.practice_list, catalog["practiceTests"])
            self.practice_frame.tkraise()
        elif controller.results_shown:
            self._render_results()
            self.results_frame.tkraise()
        else:
            self._render_question()
            self.quiz_frame.tkraise()

    def _render_home(self, catalog: dict) -> None:
        self.items_label.config(text=f"{catalog['itemsAvailable']} Items Available")
        self.topics_button.config(
            text=f"Topics ({catalog['topicsAvailable']} topics available)"
        )
        self.practice_button.config(
            text=f"Practice Tests ({catalog['practiceTestsAvailable']} tests available)"
        )

    def _render_cards(self, container: tk.Frame, entries: list[dict]) -> None:
        for widget in container.winfo_children():
            widget.destroy()
        for entry in entries:
            background = "#ffffff" if entry["available"] else "#eeeeee"
            card = tk.Frame(
                container,
                bg=background,
                highlightthickness=1,
                highlightbackground="#e0e0e0",
                padx=12,
                pady=6,
            )
            card.pack(fill=tk.X, pady=3)
            title = tk.Label(card, text=entry["title"], font=("Segoe UI", 11, "bold"), bg=background)
            title.pack(anchor=tk.W)
            status = tk.Label(
                card,
                text=entry["status"],
                font=("Segoe UI", 9),
                fg="#2e7d32" if entry["available"] else "#9e9e9e",
                bg=background,
            )
            status.pack(anchor=tk.W)

            def on_click(_event: tk.Event, content_id: str = entry["id"]) -> None:
                self._start_quiz(content_id)

            for widget in (card, title, status):
                widget.bind("<Button-1>", on_click)

    def _render_question(self) -> None:
        payload = serialize_question(self.controller)
        self.quiz_title.config(text=self.controller.state.topic.title)
        self.question_label.config(text=payload["label"])
        self.progress.config(value=payload["progressPercent"])
        text = payload["question"]
        if payload["hint"]:
            text = f"{text} {payload['hint']}"
        self.question_text.config(text=text)

        for widget in self.options_container.winfo_children():
            widget.destroy()
        for option in payload["options"]:
            tk.Button(
                self.options_container,
                text=f"{option['letter']} {option['text']}",
                anchor="w",
                justify=tk.LEFT,
                wraplength=880,
                relief=tk.FLAT,
                bg=SELECTED_COLOR if option["selected"] else "#ffffff",
                command=lambda idx=option["index"]: self._select_answer(idx),
            ).pack(fill=tk.X, pady=3)

        self.next_button.config(
            text=payload["advanceLabel"],
            state=tk.NORMAL if payload["canProceed"] else tk.DISABLED,
        )

    def _render_results(self) -> None:
        review = serialize_review(self.controller.state)
        self.summary_label.config(
            text=f"{review['title']}: {review['score']}% | "
            f"Correct {review['correctCount']} | Time {review['timeTaken']}"
        )
        for widget in self.review_container.winfo_children():
            widget.destroy()
        for item in review["questions"]:
            frame = tk.Frame(
                self.review_container,
                bg="#ffffff",
                highlightthickness=1,
                highlightbackground="#e0e0e0",
                padx=8,
                pady=6,
            )
            frame.pack(fill=tk.X, pady=4)
            mark = "✔" if item["isCorrect"] else "✘"
            heading = f"{mark} {item['number']}. {item['question']}"
            if item["hint"]:
                heading = f"{heading} {item['hint']}"
            tk.Label(
                frame, text=heading, bg="#ffffff", wraplength=880, justify=tk.LEFT
            ).pack(anchor=tk.W)
            for option in item["options"]:
                tk.Label(
                    frame,
                    text=option["text"],
                    bg=OPTION_COLORS.get(option["status"], "#ffffff"),
                    anchor="w",
                    wraplength=860,
                    justify=tk.LEFT,
                ).pack(fill=tk.X, padx=10, pady=1)
            if item["explanation"]:
                tk.Label(
                    frame,
                    text=item["explanation"],
                    fg="#666666",
                    bg="#ffffff",
                    wraplength=880,
                    justify=tk.LEFT,
                ).pack(anchor=tk.W, pady=(4, 0))


if __name__ == "__main__":
    setup_console_logging(LOG_LEVEL)
    app = QuizApp()
    app.mainloop()
