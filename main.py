from fleet_manager.main import create_app

app = create_app()
