import socket
import sys
import threading
import time
from pathlib import Path

import uvicorn

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from api.app import app  # noqa: E402
from api.config import HOST, PORT  # noqa: E402
from app.main import QuizApp  # noqa: E402
from content import HttpContentSource  # noqa: E402


def wait_for_server(host, port, timeout=10):
    start = time.time()
    while time.time() - start < timeout:
        try:
            with socket.create_connection((host, port), timeout=0.5):
                return True
        except OSError:
            time.sleep(0.2)
    return False


def serve():
    uvicorn.run(app, host=HOST, port=PORT, log_level="info")


def main():
    threading.Thread(target=serve, name="content_server", daemon=True).start()
    if not wait_for_server(HOST, PORT):
        print(f"Content server did not start on {HOST}:{PORT}")
        sys.exit(1)

    quiz = QuizApp(HttpContentSource(f"http://{HOST}:{PORT}"))
    quiz.mainloop()


if __name__ == "__main__":
    main()
