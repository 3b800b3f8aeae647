import argparse
import csv
import sys

from config import get_config
from errors import PersistenceError
from functions import make_clock
from storage import SubscriptionStore
from validation import validate_email_address


# --- Commands ---
def list_subscriptions(store, out=sys.stdout):
    subscriptions = store.get_all()
    if not subscriptions:
        print("No subscriptions found.", file=out)
        return 0
    for sub in subscriptions:
        print(f"{sub.id}\t{sub.email}\t{sub.created_at.isoformat()}", file=out)
    print(f"Total: {len(subscriptions)}", file=out)
    return 0


def add_subscription(store, email, out=sys.stdout):
    message = validate_email_address(email)
    if message:
        print(f"Error: {message}", file=out)
        return 1

    existing = store.get_by_email(email)
    sub = store.save(email)
    if existing is not None:
        print(f"Already subscribed: {sub.id}\t{sub.email}", file=out)
    else:
        print(f"Added: {sub.id}\t{sub.email}", file=out)
    return 0


def export_subscriptions(store, csv_path, out=sys.stdout):
    subscriptions = store.get_all()
    with open(csv_path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["id", "email", "createdAt"])
        for sub in subscriptions:
            writer.writerow([sub.id, sub.email, sub.created_at.isoformat()])
    print(f"Exported {len(subscriptions)} subscriptions to {csv_path}", file=out)
    return 0


def build_parser():
    parser = argparse.ArgumentParser(description="Inspect and maintain the email subscriptions file.")
    parser.add_argument("--file", help="Subscriptions JSON file (defaults to SUBSCRIPTIONS_FILE).")
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("list", help="Print every subscription.")

    add = commands.add_parser("add", help="Subscribe an email address.")
    add.add_argument("email")

    export = commands.add_parser("export", help="Write all subscriptions to a CSV file.")
    export.add_argument("--csv", required=True, dest="csv_path")
    return parser


def main(argv=None, out=sys.stdout):
    args = build_parser().parse_args(argv)
    settings = get_config()
    store = SubscriptionStore(args.file or settings.SUBSCRIPTIONS_FILE, clock=make_clock(settings.TIMEZONE))

    try:
        with store:
            if args.command == "list":
                return list_subscriptions(store, out)
            if args.command == "add":
                return add_subscription(store, args.email, out)
            return export_subscriptions(store, args.csv_path, out)
    except PersistenceError as e:
        print(f"Error: {e.message}", file=out)
        return 1
    except OSError as e:
        print(f"Error: {e}", file=out)
        return 1


# --- Main Execution ---
if __name__ == "__main__":
    sys.exit(main())
