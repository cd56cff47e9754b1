"""Run the API server: python -m livematch"""

import uvicorn

from livematch.config import Config


def main() -> None:
    uvicorn.run("livematch.api.app:app", host=Config.API_HOST, port=Config.API_PORT)


if __name__ == "__main__":
    main()
