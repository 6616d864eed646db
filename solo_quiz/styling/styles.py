"""Centralized Qt stylesheets for the application."""

from .color_palette import ColorPalette


class Styles:
    """Helper class that generates Qt stylesheets."""

    @staticmethod
    def get_main_window_style() -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY};
                color: {ColorPalette.TEXT_PRIMARY};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT};
                border: 1px solid {ColorPalette.BUTTON_PRIMARY_BG};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:disabled {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY};
                color: {ColorPalette.TEXT_DISABLED};
                border: 1px solid {ColorPalette.BORDER_PRIMARY};
            }}
            QRadioButton {{
                padding: 4px 0;
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_counter_label_style() -> str:
        return f"color: {ColorPalette.TEXT_SECONDARY};"
