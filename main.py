#!/usr/bin/env python3
from groupguard.bot import main


if __name__ == "__main__":
    main()
