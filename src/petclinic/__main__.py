from petclinic.cli.app import app

app()
