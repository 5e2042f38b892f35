import typing


CallbackType = typing.Callable[..., typing.Any]


# Events emitted by the editing session.
GRID_CHANGED = "grid_changed"
CURSOR_MOVED = "cursor_moved"
PATTERN_SIZE_CHANGED = "pattern_size_changed"
ADVISORY = "advisory"


class EventEmitter:

	"""
	A simple synchronous event emitter.

	The rendering layer subscribes to redraw when the session's grid, cursor
	or pattern size changes. Callbacks run on the caller's thread, in
	registration order, before :meth:`emit` returns.
	"""

	def __init__ (self) -> None:

		"""
		Initialize an empty event registry.
		"""

		self._listeners: typing.Dict[str, typing.List[CallbackType]] = {}


	def on (self, event_name: str, callback: CallbackType) -> None:

		"""
		Register a callback for an event name.
		"""

		if event_name not in self._listeners:
			self._listeners[event_name] = []

		self._listeners[event_name].append(callback)

	def off (self, event_name: str, callback: CallbackType) -> None:

		"""
		Unregister a previously registered callback.

		Raises ``ValueError`` if the callback is not registered for the event.
		"""

		if event_name not in self._listeners or callback not in self._listeners[event_name]:
			raise ValueError(f"Callback not registered for event {event_name!r}")

		self._listeners[event_name].remove(callback)


	def emit (self, event_name: str, *args: typing.Any, **kwargs: typing.Any) -> None:

		"""
		Call every listener registered for ``event_name``.
		"""

		if event_name not in self._listeners:
			return

		for callback in list(self._listeners[event_name]):
			callback(*args, **kwargs)
