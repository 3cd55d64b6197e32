from mangum import Mangum

from todolists.main import app

handler = Mangum(app, lifespan="off")
