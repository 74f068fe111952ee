import csv
from datetime import datetime, timezone


def entry_date():
    return datetime.now(timezone.utc).isoformat()[:19] + "Z"


class Log:
    fieldnames = []

    def __init__(self):
        self.rows = []

    def save(self, path=None, f=None):
        if not f:
            with open(path, "w", newline="") as f:
                return self.save(f=f)

        writer = csv.DictWriter(f, self.fieldnames)
        writer.writeheader()
        for row in self.rows:
            writer.writerow(row)


class IssueLog(Log):
    """
    advisory problems found in the listings while filtering
    """

    fieldnames = [
        "entry-date",
        "channel",
        "start",
        "field",
        "issue-type",
        "value",
        "message",
    ]

    def __init__(self):
        super().__init__()
        self.fieldname = "unknown"
        self.channel = ""
        self.start = ""

    def log(self, issue_type, value, message=None):
        self.log_issue(self.fieldname, issue_type, value, message)

    def log_issue(
        self,
        fieldname,
        issue_type,
        value,
        message=None,
        channel=None,
        start=None,
    ):
        self.rows.append(
            {
                "entry-date": entry_date(),
                "channel": channel or self.channel,
                "start": start or self.start,
                "field": fieldname,
                "issue-type": issue_type,
                "value": value,
                "message": message,
            }
        )

    def issue_types(self):
        return [row["issue-type"] for row in self.rows]
