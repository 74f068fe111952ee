from .phase import Phase


class LoadPhase(Phase):
    """
    start a stream from records already read
    """

    def __init__(self, records, kind=""):
        self.records = records
        self.kind = kind

    def process(self, stream=None):
        for number, record in enumerate(self.records, start=1):
            yield {
                "kind": self.kind,
                "row": record,
                "entry-number": number,
            }
