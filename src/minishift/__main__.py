from minishift.cli._dispatcher import cli

if __name__ == "__main__":
    cli()
