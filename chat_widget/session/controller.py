"""Chat session controller: the conversation state machine.

Owns the transcript, the backend thread identifier, the pending input and
the busy flag. Every state change is announced to registered listeners,
which is how persistence and the page stay in sync.

All mutations happen on the event loop between suspension points, so each
event (bootstrap result, submit, reply, teardown) is applied atomically.
Bootstrap and a submission may still interleave: a message sent before the
thread is initialized carries no thread identifier, and the welcome message
lands after it.
"""

import logging
from collections.abc import Callable

from chat_widget.client.backend import BackendClient, BackendError
from chat_widget.models.bot_config import BotConfig
from chat_widget.models.schemas import ChangeKind, Message
from chat_widget.session.sync import PersistenceSynchronizer
from chat_widget.storage.transcript import TranscriptStore

logger = logging.getLogger(__name__)

StateListener = Callable[["ChatSessionController", ChangeKind], None]


class ChatSessionController:
    """Coordinates transcript state, the backend and durable storage.

    Wraps a single conversation with:
    - Transcript restored from the store at construction
    - One-time thread bootstrap with welcome or error message
    - Busy-gated message submission
    - Change notifications for persistence and presentation
    """

    def __init__(
        self,
        client: BackendClient,
        store: TranscriptStore,
        bot_config: BotConfig | None = None,
    ) -> None:
        """Initialize the controller and restore the stored transcript.

        Args:
            client: Backend client for init-thread and chat calls.
            store: Persistence port for the transcript.
            bot_config: Display strings; fallbacks apply when omitted.
        """
        self._client = client
        self._bot_config = bot_config or BotConfig()
        self._messages: list[Message] = store.load()
        self._listeners: list[StateListener] = []
        self._bootstrapped = False
        self._synchronizer = PersistenceSynchronizer(store)
        self.add_listener(self._synchronizer.on_change)

        self.thread_id: str | None = None
        self.pending_input: str = ""
        self.is_busy: bool = False

    @property
    def messages(self) -> list[Message]:
        """Snapshot of the transcript in chronological order."""
        return list(self._messages)

    def add_listener(self, listener: StateListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: StateListener) -> None:
        self._listeners.remove(listener)

    def _notify(self, change: ChangeKind) -> None:
        for listener in list(self._listeners):
            listener(self, change)

    def _append(self, message: Message) -> None:
        self._messages.append(message)
        self._notify(ChangeKind.MESSAGES)

    def _replace(self, messages: list[Message]) -> None:
        self._messages = messages
        self._notify(ChangeKind.MESSAGES)

    def _set_busy(self, busy: bool) -> None:
        self.is_busy = busy
        self._notify(ChangeKind.BUSY)

    def _set_thread(self, thread_id: str) -> None:
        self.thread_id = thread_id
        self._notify(ChangeKind.THREAD)

    async def bootstrap(self) -> None:
        """Negotiate a thread with the backend, once per session.

        A fresh conversation gets the welcome message on success. On failure
        the conversation is reset to the error message and no thread is kept.
        """
        if self._bootstrapped:
            logger.debug("Bootstrap already ran, ignoring")
            return
        self._bootstrapped = True

        started_empty = not self._messages

        try:
            thread_id = await self._client.init_thread()
        except BackendError as e:
            logger.error(f"Error initializing thread: {e}")
            self._replace([Message.assistant(self._bot_config.bootstrap_error_text)])
            return

        self._set_thread(thread_id)
        if started_empty:
            self._append(Message.assistant(self._bot_config.welcome_text))

    async def submit(self, text: str) -> None:
        """Send a user message and record the reply.

        Blank text, or a call while a previous submission is in flight, is
        ignored. The busy flag is raised before the request goes out and is
        always cleared afterwards.

        Args:
            text: The message exactly as typed; it is stored untrimmed.
        """
        if not text.strip() or self.is_busy:
            logger.debug("Ignoring blank or concurrent submission")
            return

        self._append(Message.user(text))
        self.pending_input = ""
        self._set_busy(True)

        try:
            reply = await self._client.send_message(text, self.thread_id)
            if reply:
                self._append(Message.assistant(reply))
        except BackendError as e:
            logger.error(f"Error sending message: {e}")
            self._append(Message.assistant(self._bot_config.reply_error_text))
        finally:
            self._set_busy(False)

    async def submit_pending(self) -> None:
        """Submit whatever is currently in the input."""
        await self.submit(self.pending_input)

    def teardown(self) -> None:
        """Flush the transcript when the page goes away.

        In-flight requests are not cancelled.
        """
        self._synchronizer.flush(self._messages)
