from asyncapi_exporter.cli.main import run

run()
