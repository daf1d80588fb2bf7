import logging
from dotenv import load_dotenv
from atm.console import AtmConsole
from atm.services.atm_service import AtmService
from atm.services.directory import AccountDirectory
from config.settings import Settings

load_dotenv()

# Load settings from environment variables
settings = Settings.load()

logger = logging.getLogger('atm')
logger.setLevel(settings.log_level)
handler = logging.FileHandler(filename=settings.log_file, encoding='utf-8', mode='w')
handler.setFormatter(logging.Formatter('%(asctime)s:%(levelname)s:%(name)s: %(message)s'))
logger.addHandler(handler)


def main():
    directory = AccountDirectory.from_seeds(settings.seed_accounts)
    AtmConsole(AtmService(directory), settings).run()


if __name__ == '__main__':
    main()
