import azure.functions as func

from media_catalog_service.blueprints import catalog_bp, interactions_bp, recommendations_bp

app = func.FunctionApp()

app.register_blueprint(recommendations_bp)
app.register_blueprint(catalog_bp)
app.register_blueprint(interactions_bp)
