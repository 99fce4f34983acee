from core.config.config_service import config_service
from core.logging.logic.logger import configure_logging, logger
from framework.gui.main_window import MainWindow


def main() -> None:
    configure_logging(config_service.logging.level, config_service.logging.log_file or None)
    logger.log(feature="App", event="Start", message=config_service.general.version)
    app = MainWindow()
    app.mainloop()


if __name__ == "__main__":
    main()
