#!/usr/bin/env python3
"""
Battery Tray - Tray-Only Application
Shows the battery percentage as a tray icon, using composition with tray_actions

Battery levels come from outside: the initial value from the command line,
later values one per line on stdin (e.g. piped from a battery monitor).
"""

import argparse
import sys
import signal
import threading

from PyQt6.QtWidgets import QApplication, QSystemTrayIcon, QMenu
from PyQt6.QtCore import QTimer, pyqtSignal, QObject
from PyQt6.QtGui import QIcon, QPixmap

from font_sources import font_source_from_name
from icon_config import TEMPLATE_FILLS
from logging_config import setup_logging, get_logger
from tray_actions import TrayIconUpdater, parse_battery_level

logger = get_logger(__name__)


class QtTrayTarget:
    """Puts rendered PNG bytes on a QSystemTrayIcon"""

    def __init__(self, tray_icon):
        self.tray_icon = tray_icon

    def show_icon(self, png_bytes, template):
        pixmap = QPixmap()
        if not pixmap.loadFromData(png_bytes, "PNG"):
            logger.error("Failed to create pixmap from icon bytes")
            return False

        icon = QIcon(pixmap)
        # macOS renders mask icons as template images tinted for the menu bar
        icon.setIsMask(template)
        self.tray_icon.setIcon(icon)
        return True


class BatteryTray(QObject):
    """Battery tray application - tray-only mode using composition"""

    # Emitted from the stdin reader thread, handled on the GUI thread
    percentage_changed = pyqtSignal(int)

    def __init__(self, font_source=None, template_fill=None):
        super().__init__()

        self.tray_icon = QSystemTrayIcon(self)
        self.updater = TrayIconUpdater(
            QtTrayTarget(self.tray_icon),
            font_source=font_source,
            template_fill=template_fill,
        )

        self.percentage_changed.connect(self.on_percentage_changed)

        self.init_tray_icon()

    def init_tray_icon(self):
        """Initialize system tray icon and its menu"""
        self.menu = QMenu()

        refresh_action = self.menu.addAction("Refresh")
        refresh_action.triggered.connect(self.updater.refresh)

        self.menu.addSeparator()

        quit_action = self.menu.addAction("Quit")
        quit_action.triggered.connect(self.quit_application)

        self.tray_icon.setContextMenu(self.menu)
        self.tray_icon.setToolTip("Battery")
        self.tray_icon.show()

        logger.info("Tray icon initialized")

    def on_percentage_changed(self, percentage):
        """Update the icon for a new battery level (GUI thread)"""
        if self.updater.update(percentage):
            self.tray_icon.setToolTip(f"Battery: {percentage}%")

    def start_stdin_reader(self):
        """Read battery percentages from stdin in a background thread"""
        def read_levels():
            for line in sys.stdin:
                percentage = parse_battery_level(line)
                if percentage is not None:
                    self.percentage_changed.emit(percentage)
            logger.debug("Battery level input closed")

        thread = threading.Thread(target=read_levels, daemon=True)
        thread.start()

    def quit_application(self):
        """Quit the application"""
        logger.info("Quitting application...")
        self.tray_icon.hide()
        QApplication.quit()


def main():
    """Main entry point"""
    parser = argparse.ArgumentParser(description='Show the battery percentage as a tray icon')
    parser.add_argument(
        'percentage',
        nargs='?',
        type=int,
        default=100,
        help='Initial battery percentage (default: 100)'
    )
    parser.add_argument(
        '--font', '-f',
        default='bundled',
        help='Font source: "bundled", "system" or a path to a font file (default: bundled)'
    )
    parser.add_argument(
        '--fill',
        choices=sorted(TEMPLATE_FILLS),
        help='Background of template icons (default: black on macOS, white elsewhere)'
    )
    parser.add_argument(
        '--stdin',
        action='store_true',
        help='Read further battery percentages from stdin, one per line'
    )
    args = parser.parse_args()

    setup_logging()
    logger.info("Starting Battery Tray")

    app = QApplication(sys.argv)
    app.setQuitOnLastWindowClosed(False)

    if not QSystemTrayIcon.isSystemTrayAvailable():
        logger.error("System tray is not available on this system")
        sys.exit(1)

    template_fill = TEMPLATE_FILLS[args.fill] if args.fill else None
    battery_tray = BatteryTray(font_source=font_source_from_name(args.font), template_fill=template_fill)
    battery_tray.on_percentage_changed(args.percentage)

    if args.stdin:
        battery_tray.start_stdin_reader()

    shutdown_requested = [False]

    def signal_handler(signum, frame):
        """Handle shutdown signals gracefully"""
        if shutdown_requested[0]:
            return
        shutdown_requested[0] = True
        signal_name = signal.Signals(signum).name
        logger.info(f"Received signal {signal_name}, shutting down gracefully...")
        # Use QTimer to quit from event loop
        QTimer.singleShot(0, battery_tray.quit_application)

    signal.signal(signal.SIGINT, signal_handler)
    signal.signal(signal.SIGTERM, signal_handler)

    # Qt event loop blocks Python signal handlers, so wake up periodically
    timer = QTimer()
    timer.start(1000)
    timer.timeout.connect(lambda: None)

    try:
        exit_code = app.exec()
        sys.exit(exit_code)
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt received, shutting down...")
        battery_tray.quit_application()
        sys.exit(0)


if __name__ == "__main__":
    main()
