# Import models here so they can be imported from portfolio_api.models
from portfolio_api.models.photo import Photo
from portfolio_api.models.profile import Profile
