"""
Chat with the writing assistant from a terminal.

    python manage.py assistant_chat experiences --item-id 3 --role-type software_engineer

Commands inside the session: /retry resends the last failed message,
/reset clears the history, /quit exits.
"""
from django.core.management.base import BaseCommand

from assistant import constants
from assistant.context import build_context
from assistant.conversation import AssistantConversation
from assistant.services import CompletionError, CompletionRateLimitError
from assistant.store import ORMRecordStore


class Command(BaseCommand):
    help = "Open an interactive writing assistant session for one record."

    def add_arguments(self, parser):
        parser.add_argument("collection", choices=constants.COLLECTIONS)
        parser.add_argument("--item-id", default=None)
        parser.add_argument("--role-type", default=constants.DEFAULT_ROLE_TYPE)
        parser.add_argument("--field", default=None)

    def handle(self, *args, **options):
        context = build_context(
            ORMRecordStore(),
            options["collection"],
            item_id=options["item_id"],
            role_type=options["role_type"],
            field=options["field"],
        )
        conversation = AssistantConversation(context)
        self.stdout.write(f"Editing {options['collection']} as {options['role_type']}. /quit to exit.")

        while True:
            try:
                text = input("> ").strip()
            except EOFError:
                break
            if not text:
                continue
            if text == "/quit":
                break
            if text == "/reset":
                conversation.reset()
                self.stdout.write("History cleared.")
                continue

            try:
                if text == "/retry":
                    if conversation.pending_message is None:
                        self.stdout.write("Nothing to retry.")
                        continue
                    result = conversation.retry()
                else:
                    result = conversation.send(text)
            except CompletionRateLimitError:
                self.stderr.write("Rate limit reached. Wait a moment, then /retry.")
                continue
            except CompletionError as exc:
                self.stderr.write(f"{exc.user_message} ({exc.code}). Type /retry to resend.")
                continue

            self.stdout.write(result.content)
