from aiogram.utils.keyboard import ReplyKeyboardBuilder

from .texts import BTN_COMPOSE, BTN_RETRIEVE


def main_menu() -> ReplyKeyboardBuilder:
    kb = ReplyKeyboardBuilder()
    kb.button(text=BTN_COMPOSE)
    kb.button(text=BTN_RETRIEVE)
    kb.adjust(2)
    return kb
