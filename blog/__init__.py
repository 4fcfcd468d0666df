from blog.settings import Settings

settings = Settings()
