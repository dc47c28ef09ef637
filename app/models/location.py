from app.extensions import db


class Location(db.Model):
    __tablename__ = 'locations'

    id = db.Column(db.Integer, primary_key=True)
    search_query = db.Column(db.Text, nullable=False, unique=True)
    formatted_query = db.Column(db.String(512))
    latitude = db.Column(db.Float, nullable=False)
    longitude = db.Column(db.Float, nullable=False)

    weathers = db.relationship('Weather', back_populates='location', lazy='dynamic')
    events = db.relationship('Event', back_populates='location', lazy='dynamic')
    movies = db.relationship('Movie', back_populates='location', lazy='dynamic')

    @classmethod
    def from_record(cls, record):
        return cls(
            search_query=record['search_query'],
            formatted_query=record['formatted_query'],
            latitude=record['latitude'],
            longitude=record['longitude'],
        )

    def to_dict(self):
        return {
            'id': self.id,
            'search_query': self.search_query,
            'formatted_query': self.formatted_query,
            'latitude': self.latitude,
            'longitude': self.longitude,
        }
