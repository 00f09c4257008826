import dotenv

from hw_command_server.server import main

dotenv.load_dotenv()


if __name__ == "__main__":
    main()
