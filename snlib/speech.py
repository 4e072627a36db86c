"""
Screen reader output for the StatNav application
"""

import queue
import threading
import time
import logging

from snlib.utils import sanitize_speech_text

logger = logging.getLogger("StatNav")


class SpeechOutput:
    """Queued, non-blocking speech through accessible_output2"""

    def __init__(self, speaker=None, min_interval=0.1, reinit_cooldown=10):
        """
        Initialize the speech output

        Args:
            speaker: Object with a speak(text, interrupt=...) method; an
                accessible_output2 Auto speaker is created on start when omitted
            min_interval: Minimum seconds between two utterances
            reinit_cooldown: Seconds to wait before re-creating a failed speaker
        """
        self.speaker = speaker
        self.min_interval = min_interval
        self.reinit_cooldown = reinit_cooldown
        self.speech_queue = queue.Queue()
        self.stop_requested = threading.Event()
        self.worker_thread = None
        self.last_speech_time = 0
        self.last_reinit_time = 0

    def __call__(self, message, interrupt=False):
        self.speak(message, interrupt)

    def _create_speaker(self):
        """Create the accessible_output2 speaker, or None if no engine is usable"""
        try:
            import accessible_output2.outputs.auto as ao
            speaker = ao.Auto()
            logger.info("Speech engine initialized")
            return speaker
        except Exception as e:
            logger.error(f"Failed to initialize speech engine: {e}")
            return None

    def start(self):
        """Start the background speech thread"""
        if self.worker_thread is not None and self.worker_thread.is_alive():
            return
        self.stop_requested.clear()
        if self.speaker is None:
            self.speaker = self._create_speaker()
        self.worker_thread = threading.Thread(target=self._speech_thread_worker, daemon=True)
        self.worker_thread.start()

    def stop(self, timeout=1.0):
        """Stop the background speech thread"""
        self.stop_requested.set()
        if self.worker_thread is not None:
            self.worker_thread.join(timeout=timeout)
            self.worker_thread = None

    def speak(self, message, interrupt=False):
        """
        Queue a message to be spoken by screen reader (non-blocking)

        Args:
            message: Text string to be spoken
            interrupt: Drop pending messages and cut off current speech
        """
        safe_message = sanitize_speech_text(message)
        if not safe_message:
            return

        if interrupt:
            self.clear_pending()

        try:
            self.speech_queue.put((safe_message, interrupt), block=False)
        except queue.Full:
            logger.warning("Speech queue full, dropping message")

    def clear_pending(self):
        """Drop every queued message that has not been spoken yet"""
        while True:
            try:
                self.speech_queue.get_nowait()
                self.speech_queue.task_done()
            except queue.Empty:
                break

    def _speech_thread_worker(self):
        """Background thread that processes speech queue to avoid blocking key handling"""
        while not self.stop_requested.is_set():
            try:
                message, interrupt = self.speech_queue.get(timeout=0.1)
            except queue.Empty:
                continue

            try:
                self.output(message, interrupt)
            finally:
                self.speech_queue.task_done()

    def output(self, message, interrupt=False):
        """
        Speak a message right away on the calling thread

        Args:
            message: Sanitized text to speak
            interrupt: Whether to cut off current speech
        """
        if self.speaker is None:
            logger.info(f"SPEECH: {message}")
            return

        # Limit rate of announcements
        elapsed = time.time() - self.last_speech_time
        if not interrupt and elapsed < self.min_interval:
            time.sleep(self.min_interval - elapsed)

        try:
            self.speaker.speak(message, interrupt=interrupt)
            self.last_speech_time = time.time()
        except Exception as speech_error:
            logger.error(f"Speech error: {speech_error}")

            # Try to reinitialize the speech engine after cooldown
            current_time = time.time()
            if current_time - self.last_reinit_time > self.reinit_cooldown:
                self.last_reinit_time = current_time
                new_speaker = self._create_speaker()
                if new_speaker is not None:
                    self.speaker = new_speaker
                    logger.info("Reinitialized speech engine")
