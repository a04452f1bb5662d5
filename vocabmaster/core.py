from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from vocabmaster.application.learning.use_cases.review_session_use_case import (
    ReviewSessionUseCase,
)
from vocabmaster.application.learning.use_cases.study_record_use_case import StudyRecordUseCase
from vocabmaster.application.vocabulary.use_cases.word_set_use_case import WordSetUseCase
from vocabmaster.application.vocabulary.use_cases.word_use_case import WordUseCase
from vocabmaster.domain.learning.services.study_stats_calculator import StudyStatsCalculator
from vocabmaster.infrastructure.learning.repositories import (
    InMemoryReviewSessionStore,
    StudyRecordRepository,
)
from vocabmaster.infrastructure.vocabulary.repositories import (
    WordRepository,
    WordSetRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    # Repositories
    word_set_repository = providers.Factory(WordSetRepository, db=db)
    word_repository = providers.Factory(WordRepository, db=db)
    study_record_repository = providers.Factory(StudyRecordRepository, db=db)

    # Live review sessions outlive a request, so one store per process
    review_session_store = providers.Singleton(InMemoryReviewSessionStore)

    # Domain services (pure domain logic, no db)
    study_stats_calculator = providers.Factory(StudyStatsCalculator)

    # Vocabulary module, application use cases
    word_set_use_case = providers.Factory(
        WordSetUseCase,
        word_set_repository=word_set_repository,
    )
    word_use_case = providers.Factory(
        WordUseCase,
        word_repository=word_repository,
        word_set_repository=word_set_repository,
    )

    # Learning module, application use cases
    review_session_use_case = providers.Factory(
        ReviewSessionUseCase,
        session_store=review_session_store,
        word_set_repository=word_set_repository,
        word_repository=word_repository,
        study_record_repository=study_record_repository,
    )
    study_record_use_case = providers.Factory(
        StudyRecordUseCase,
        study_record_repository=study_record_repository,
        stats_calculator=study_stats_calculator,
    )


container = Container()
