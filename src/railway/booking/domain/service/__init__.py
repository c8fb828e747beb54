from .pnr_allocator import PnrAllocator as PnrAllocator
