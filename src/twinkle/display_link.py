class RenderLoop:
    """
    The per-frame scheduling loop. Whoever drives rendering calls `fire` once
    per frame; every registered display link then receives the tick.
    """

    _current = None

    def __init__(self):
        self.display_links = []

    @classmethod
    def current(cls):
        """The process-wide default loop."""
        if cls._current is None:
            cls._current = cls()
        return cls._current

    def add(self, display_link):
        if display_link not in self.display_links:
            self.display_links.append(display_link)

    def remove(self, display_link):
        if display_link in self.display_links:
            self.display_links.remove(display_link)

    def fire(self, timestamp):
        for display_link in list(self.display_links):
            if display_link.is_valid:
                display_link.fire(timestamp)


class DisplayLink:
    """A per-frame callback registration. `target` is called with the link."""

    def __init__(self, target):
        self.target = target
        self.timestamp = 0.0
        self.is_valid = True
        self._loops = []

    def add_to(self, run_loop):
        if not self.is_valid:
            raise ValueError("Cannot schedule an invalidated display link")
        run_loop.add(self)
        if run_loop not in self._loops:
            self._loops.append(run_loop)

    def remove_from(self, run_loop):
        run_loop.remove(self)
        if run_loop in self._loops:
            self._loops.remove(run_loop)

    def invalidate(self):
        """Removes the link from every loop; it will never fire again."""
        for run_loop in list(self._loops):
            self.remove_from(run_loop)
        self.is_valid = False
        self.target = None

    def fire(self, timestamp):
        self.timestamp = timestamp
        if self.target is not None:
            self.target(self)
