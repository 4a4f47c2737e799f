from . import discord, imessage, msteams, signal, slack, telegram, whatsapp

__all__ = ["discord", "imessage", "msteams", "signal", "slack", "telegram", "whatsapp"]
