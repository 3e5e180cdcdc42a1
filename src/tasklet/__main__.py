# src/tasklet/__main__.py

from tasklet.cli.main import main

main()
