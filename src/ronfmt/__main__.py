from ronfmt.cli import main

main(prog_name="ronfmt")
