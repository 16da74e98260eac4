class MarkdownDocument:
    """Append-only buffer of rendered fragments for a single conversion."""

    def __init__(self):
        self.fragments = []

    def add(self, *fragments):
        for fragment in fragments:
            self.fragments.append(fragment)

    def get(self):
        return "".join(self.fragments)

    def __len__(self):
        return len(self.fragments)
