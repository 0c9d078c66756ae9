"""Entry point for `python -m prover_order`."""

from dotenv import load_dotenv

load_dotenv()

from prover_order.cli import main

if __name__ == "__main__":
    main()
