import logging

from telegram import Update
from telegram.ext import ContextTypes

logger = logging.getLogger(__name__)

UNAUTHORIZED_REPLY = "⛔ Unauthorized user."
BUSY_REPLY = "⏳ A briefing is already being prepared."


async def handle_now(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle /now command: run the briefing right away."""
    briefing = context.bot_data["briefing"]
    chat_id = update.effective_chat.id

    if not briefing.is_authorized(chat_id):
        logger.warning(f"Unauthorized /now from chat {chat_id}")
        await update.effective_message.reply_text(UNAUTHORIZED_REPLY)
        return

    if briefing.running:
        await update.effective_message.reply_text(BUSY_REPLY)
        return

    await briefing.send(trigger="manual")


async def handle_error(update: object, context: ContextTypes.DEFAULT_TYPE):
    """Log errors raised inside handlers instead of letting them surface."""
    logger.error(f"Error while handling update {update}", exc_info=context.error)
