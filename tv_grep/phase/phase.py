class Phase:
    """
    a step in processing a stream of blocks, each holding a record as its row
    """

    def process(self, stream):
        for block in stream:
            yield block
