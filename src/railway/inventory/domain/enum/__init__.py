from .train_sort_key import TrainSortKey as TrainSortKey
