"""Infrastructure: Firestore and Firebase Auth REST clients, repositories."""
